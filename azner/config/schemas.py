"""
JSON Schema for the serialized recognition report.

Consumers that receive a report over the wire validate it with
azner.postprocessing.validation.validate_recognition_report().
"""
from azner.config.constants import REPORT_SCHEMA_VERSION
from azner.models.entity import EntityType

ENTITY_TYPE_NAMES = [t.value for t in EntityType]

# =============================================================================
# Entity item
# =============================================================================
ENTITY_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["text", "start", "end", "type", "labeled"],
    "properties": {
        "text": {"type": "string", "minLength": 1},
        "start": {"type": "integer", "minimum": 0},
        "end": {"type": "integer", "minimum": 1},
        "type": {"type": "string", "enum": ENTITY_TYPE_NAMES},
        "labeled": {"type": "boolean"},
    },
}

# =============================================================================
# Recognition report
# =============================================================================
RECOGNITION_REPORT_SCHEMA: dict = {
    "name": REPORT_SCHEMA_VERSION,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["entities", "processing_metadata"],
        "properties": {
            "entities": {
                "type": "array",
                "items": ENTITY_SCHEMA,
            },
            "processing_metadata": {
                "type": "object",
                "required": [
                    "engine_version",
                    "input_bytes",
                    "candidates_found",
                    "entities_recognized",
                    "entities_by_type",
                    "recognition_duration_ms",
                ],
                "properties": {
                    "engine_version": {"type": "string"},
                    "input_bytes": {"type": "integer", "minimum": 0},
                    "candidates_found": {"type": "integer", "minimum": 0},
                    "entities_recognized": {"type": "integer", "minimum": 0},
                    "entities_by_type": {
                        "type": "object",
                        "additionalProperties": False,
                        "properties": {
                            name: {"type": "integer", "minimum": 0}
                            for name in ENTITY_TYPE_NAMES
                        },
                    },
                    "recognition_duration_ms": {"type": "integer", "minimum": 0},
                },
            },
        },
    },
}
