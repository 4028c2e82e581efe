"""
Entity Recognition Pipeline — orchestrates Matchers + Overlap Resolution.

Pipeline:
    1. Encode input to UTF-8 bytes (offsets are byte offsets)
    2. Run the 7 matchers in priority order (URL, Email, IBAN,
       LicensePlate, Phone, FIN, VOEN)
    3. Resolve overlaps (start → longest → labeled → matcher priority)

The pipeline is a pure function of its input: nothing survives a call.
"""
import logging
import time
from collections import Counter
from typing import List, Tuple

from azner.config.constants import (
    BYTES_DECODING_ERRORS,
    ENGINE_VERSION,
    STR_ENCODING_ERRORS,
)
from azner.entity_extraction.merger import resolve_overlaps
from azner.entity_extraction.regex_matcher import extract_candidates
from azner.models.entity import Entity, EntityType
from azner.models.recognition_io import (
    ProcessingMetadata,
    RecognitionReport,
    RecognizedEntity,
)

logger = logging.getLogger(__name__)


def _to_bytes(text: str | bytes) -> Tuple[bytes, str]:
    """Return the UTF-8 bytes to scan and the error handler to decode matches."""
    if isinstance(text, str):
        return text.encode("utf-8", STR_ENCODING_ERRORS), STR_ENCODING_ERRORS
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text), BYTES_DECODING_ERRORS
    raise TypeError(f"recognize() expects str or bytes, got {type(text).__name__}")


def _recognize_bytes(data: bytes, errors: str) -> Tuple[List[Entity], int]:
    if not data:
        return [], 0

    candidates = extract_candidates(data, errors)
    if not candidates:
        return [], 0

    resolved = resolve_overlaps(candidates)
    logger.debug(
        "Recognized %d entities from %d candidates (%d bytes)",
        len(resolved),
        len(candidates),
        len(data),
    )
    return resolved, len(candidates)


def recognize(text: str | bytes) -> List[Entity]:
    """
    Recognize structured entities in free-form text.

    Args:
        text: Input text. ``bytes`` are scanned as UTF-8 as-is; malformed
              sequences simply yield fewer matches.

    Returns:
        Non-overlapping entities sorted by start byte offset; an empty list
        when the input is empty or nothing matches.

    Raises:
        TypeError: If ``text`` is neither str nor bytes.
    """
    data, errors = _to_bytes(text)
    entities, _ = _recognize_bytes(data, errors)
    return entities


def _texts_of(text: str | bytes, entity_type: EntityType) -> List[str]:
    return [e.text for e in recognize(text) if e.type is entity_type]


def phones(text: str | bytes) -> List[str]:
    return _texts_of(text, EntityType.PHONE)


def emails(text: str | bytes) -> List[str]:
    return _texts_of(text, EntityType.EMAIL)


def urls(text: str | bytes) -> List[str]:
    return _texts_of(text, EntityType.URL)


def ibans(text: str | bytes) -> List[str]:
    return _texts_of(text, EntityType.IBAN)


def license_plates(text: str | bytes) -> List[str]:
    return _texts_of(text, EntityType.LICENSE_PLATE)


def fins(text: str | bytes) -> List[str]:
    return _texts_of(text, EntityType.FIN)


def voens(text: str | bytes) -> List[str]:
    return _texts_of(text, EntityType.VOEN)


def build_recognition_report(text: str | bytes) -> dict:
    """
    Recognize entities and package them with processing metadata.

    Returns:
        Report dict conforming to RECOGNITION_REPORT_SCHEMA.
    """
    start_time = time.monotonic()

    data, errors = _to_bytes(text)
    entities, candidates_found = _recognize_bytes(data, errors)

    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    by_type = Counter(e.type.value for e in entities)

    report = RecognitionReport(
        entities=[RecognizedEntity.from_entity(e) for e in entities],
        processing_metadata=ProcessingMetadata(
            engine_version=ENGINE_VERSION,
            input_bytes=len(data),
            candidates_found=candidates_found,
            entities_recognized=len(entities),
            entities_by_type=dict(by_type),
            recognition_duration_ms=elapsed_ms,
        ),
    )
    return report.to_dict()
