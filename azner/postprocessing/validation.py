"""
Validation — multi-stage validation of serialized recognition reports.

Implements:
- JSON parse
- Schema conformance (jsonschema)
- Business rules (positive spans, ordering, no overlaps, per-type counts)
- Quality checks (warnings only)

Problems are collected into a ValidationResult, never raised.
"""
import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from jsonschema import ValidationError, validate

from azner.config.constants import ENGINE_VERSION
from azner.config.schemas import RECOGNITION_REPORT_SCHEMA

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of report validation; data is the parsed report when it parsed."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    data: Optional[dict] = None


def check_entity_spans(entities: List[dict]) -> List[str]:
    """
    Check span invariants of a serialized entity list.

    Returns:
        List of error strings (empty when all spans are valid).
    """
    errors: List[str] = []
    prev_end = 0

    for i, ent in enumerate(entities):
        start, end = ent["start"], ent["end"]
        if start >= end:
            errors.append(f"Entity {i}: empty or inverted span [{start},{end}]")
            continue
        if start < prev_end:
            errors.append(
                f"Entity {i}: span [{start},{end}] overlaps or precedes previous end {prev_end}"
            )
        prev_end = max(prev_end, end)

    return errors


def validate_recognition_report(report: str | dict) -> ValidationResult:
    """
    Multi-stage validation of a recognition report.

    Stages:
        1. JSON Parse
        2. Schema conformance
        3. Business rules (spans, ordering, counts)
        4. Quality checks

    Args:
        report: Report as produced by build_recognition_report(), or its
                JSON serialization.

    Returns:
        ValidationResult with valid flag, errors, warnings, and parsed data.
    """
    errors: List[str] = []
    warnings: List[str] = []

    # ------------------------------------------------------------------
    # Stage 1: Parse JSON
    # ------------------------------------------------------------------
    if isinstance(report, dict):
        data = report
    else:
        try:
            data = json.loads(report)
        except json.JSONDecodeError as e:
            errors.append(f"Invalid JSON: {e}")
            return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 2: Schema validation
    # ------------------------------------------------------------------
    try:
        validate(instance=data, schema=RECOGNITION_REPORT_SCHEMA["schema"])
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    entities = data["entities"]
    metadata = data["processing_metadata"]

    # ------------------------------------------------------------------
    # Stage 3: Business rules
    # ------------------------------------------------------------------
    errors.extend(check_entity_spans(entities))

    if metadata["entities_recognized"] != len(entities):
        errors.append(
            f"entities_recognized={metadata['entities_recognized']} "
            f"but report holds {len(entities)} entities"
        )

    counted = Counter(ent["type"] for ent in entities)
    if dict(counted) != {k: v for k, v in metadata["entities_by_type"].items() if v}:
        errors.append(
            f"entities_by_type {metadata['entities_by_type']} does not match entities {dict(counted)}"
        )

    for i, ent in enumerate(entities):
        if ent["end"] > metadata["input_bytes"]:
            errors.append(
                f"Entity {i}: end {ent['end']} beyond input length {metadata['input_bytes']}"
            )
        if ent["labeled"] and ent["type"] not in ("FIN", "VOEN"):
            errors.append(f"Entity {i}: only FIN and VOEN can be labeled, got {ent['type']}")

    if metadata["candidates_found"] < len(entities):
        errors.append(
            f"candidates_found={metadata['candidates_found']} is below "
            f"the number of entities {len(entities)}"
        )

    # ------------------------------------------------------------------
    # Stage 4: Quality checks
    # ------------------------------------------------------------------
    if not entities and metadata["input_bytes"] > 0:
        warnings.append("No entities recognized in non-empty input")

    if metadata["engine_version"] != ENGINE_VERSION:
        warnings.append(
            f"Report produced by {metadata['engine_version']}, current engine is {ENGINE_VERSION}"
        )

    if errors:
        logger.warning("Recognition report failed validation: %d error(s)", len(errors))

    valid = len(errors) == 0
    return ValidationResult(valid=valid, errors=errors, warnings=warnings, data=data)
