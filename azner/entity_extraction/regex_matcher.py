"""
RegEx Entity Matchers — one fixed pattern family per entity type.

Every matcher scans the UTF-8 bytes of the whole input and returns
candidates left to right. Matching on bytes gives byte offsets directly and
ASCII-only semantics for \\b and \\d, so Azerbaijani letters with diacritics
(ə, ğ, ı, ö, ş, ü) act as non-word characters next to a code or number.

Patterns are either bounded in length or consume their input in one pass;
the email scanner never restarts inside a run it has already rejected, so
worst-case matching time stays linear on untrusted text.
"""
import logging
import re
from typing import Callable, Dict, Iterator, List, Tuple

from azner.config.constants import (
    MATCHER_PRIORITY,
    STR_ENCODING_ERRORS,
    URL_TRAILING_PUNCTUATION,
)
from azner.models.entity import Entity, EntityType

logger = logging.getLogger(__name__)

# ASCII whitespace: tab, LF, FF, CR, space (no vertical tab).
_SP = rb"[\t\n\f\r ]"

# ==========================================================================
# Compiled patterns (process-lifetime constants)
# ==========================================================================
URL_RE = re.compile(rb'https?://[^\t\n\f\r <>"{}|\\^`]+')

_EMAIL_BODY = rb"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"
EMAIL_RE = re.compile(_EMAIL_BODY)
# Same shape, but only starting where a run of local-part characters begins.
_EMAIL_AT_RUN_START_RE = re.compile(rb"(?<![a-zA-Z0-9._%+\-])" + _EMAIL_BODY)

IBAN_RE = re.compile(rb"\bAZ\d{2}[A-Z]{4}[A-Z0-9]{20}\b")

LICENSE_PLATE_RE = re.compile(rb"\b\d{2}-[A-Z]{2}-\d{3}\b")

PHONE_INTL_RE = re.compile(
    rb"\+994" + _SP + rb"?\d{2}" + _SP + rb"?\d{3}" + _SP + rb"?\d{2}" + _SP + rb"?\d{2}"
)
PHONE_LOCAL_RE = re.compile(
    rb"\b0\d{2}" + _SP + rb"?\d{3}" + _SP + rb"?\d{2}" + _SP + rb"?\d{2}\b"
)

# FIN alphabet excludes I and O (confusable with 1 and 0).
FIN_LABELED_RE = re.compile(
    rb"\bFIN[:\t\n\f\r ]" + _SP + rb"?([A-HJ-NP-Z0-9]{7})\b",
    re.IGNORECASE,
)
FIN_BARE_RE = re.compile(rb"\b[A-HJ-NP-Z0-9]{7}\b")

# Keyword "VOEN" or "VÖEN" (Ö / ö as UTF-8).
VOEN_LABELED_RE = re.compile(
    rb"\bV(?:O|\xc3\x96|\xc3\xb6)EN[:\t\n\f\r ]" + _SP + rb"?(\d{10})\b",
    re.IGNORECASE,
)
VOEN_BARE_RE = re.compile(rb"\b\d{10}\b")


# ==========================================================================
# Internal helpers
# ==========================================================================

def _entity(
    data: bytes,
    start: int,
    end: int,
    entity_type: EntityType,
    errors: str,
    labeled: bool = False,
) -> Entity:
    return Entity(
        text=data[start:end].decode("utf-8", errors),
        start=start,
        end=end,
        type=entity_type,
        labeled=labeled,
    )


def _match_spans(
    pattern: "re.Pattern[bytes]",
    data: bytes,
    entity_type: EntityType,
    errors: str,
    group: int = 0,
    labeled: bool = False,
) -> List[Entity]:
    """Turn every non-overlapping match (or one of its groups) into an Entity."""
    out: List[Entity] = []
    for match in pattern.finditer(data):
        start, end = match.span(group)
        out.append(_entity(data, start, end, entity_type, errors, labeled))
    return out


def _iter_email_spans(data: bytes) -> Iterator[Tuple[int, int]]:
    """
    Leftmost non-overlapping email matches in linear time.

    A run of local-part characters either reaches an '@' with a valid domain
    from its first byte or from none of them, so after the attempt at the
    scan position fails only run starts are tried.
    """
    pos = 0
    size = len(data)
    while pos < size:
        match = EMAIL_RE.match(data, pos) or _EMAIL_AT_RUN_START_RE.search(data, pos)
        if match is None:
            return
        yield match.span()
        pos = match.end()


# ==========================================================================
# Matchers
# ==========================================================================

def match_url(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    """HTTP/HTTPS URLs; trailing sentence punctuation is not part of the URL."""
    out: List[Entity] = []
    for match in URL_RE.finditer(data):
        start = match.start()
        end = start + len(match.group(0).rstrip(URL_TRAILING_PUNCTUATION))
        out.append(_entity(data, start, end, EntityType.URL, errors))
    return out


def match_email(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    return [
        _entity(data, start, end, EntityType.EMAIL, errors)
        for start, end in _iter_email_spans(data)
    ]


def match_iban(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    """Azerbaijani IBANs: AZ + 2 digits + 4-letter bank code + 20 alphanumerics."""
    return _match_spans(IBAN_RE, data, EntityType.IBAN, errors)


def match_license_plate(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    """Azerbaijani license plates, e.g. 10-AB-123."""
    return _match_spans(LICENSE_PLATE_RE, data, EntityType.LICENSE_PLATE, errors)


def match_phone(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    """
    Phone numbers in international (+994 XX XXX XX XX) and local
    (0XX XXX XX XX) form, spaces between groups optional.
    """
    return (
        _match_spans(PHONE_INTL_RE, data, EntityType.PHONE, errors)
        + _match_spans(PHONE_LOCAL_RE, data, EntityType.PHONE, errors)
    )


def match_fin(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    """
    FIN codes. Labeled matches ("FIN: XXXXXXX") cover only the code and come
    first; bare 7-character codes follow.
    """
    return (
        _match_spans(FIN_LABELED_RE, data, EntityType.FIN, errors, group=1, labeled=True)
        + _match_spans(FIN_BARE_RE, data, EntityType.FIN, errors)
    )


def match_voen(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    """VOEN codes: labeled ("VÖEN 1234567890") first, then bare 10-digit runs."""
    return (
        _match_spans(VOEN_LABELED_RE, data, EntityType.VOEN, errors, group=1, labeled=True)
        + _match_spans(VOEN_BARE_RE, data, EntityType.VOEN, errors)
    )


MATCHERS: Dict[EntityType, Callable[[bytes, str], List[Entity]]] = {
    EntityType.URL: match_url,
    EntityType.EMAIL: match_email,
    EntityType.IBAN: match_iban,
    EntityType.LICENSE_PLATE: match_license_plate,
    EntityType.PHONE: match_phone,
    EntityType.FIN: match_fin,
    EntityType.VOEN: match_voen,
}


def extract_candidates(data: bytes, errors: str = STR_ENCODING_ERRORS) -> List[Entity]:
    """
    Run every matcher in MATCHER_PRIORITY order and concatenate the results.

    No deduplication happens here: the order of the returned list is the
    precedence input of the overlap resolver.

    Args:
        data: UTF-8 bytes of the input text.
        errors: Codec error handler used to decode matched slices.

    Returns:
        All candidates, possibly overlapping.
    """
    candidates: List[Entity] = []
    for entity_type in MATCHER_PRIORITY:
        found = MATCHERS[entity_type](data, errors)
        if found:
            logger.debug("%s matcher: %d candidate(s)", entity_type.value, len(found))
        candidates.extend(found)
    return candidates
