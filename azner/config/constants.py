"""
Constants used across the recognition engine.
Versioned and pinned for determinism.
"""
from typing import Tuple

from azner.models.entity import EntityType

# =============================================================================
# Engine version (reported in recognition reports)
# =============================================================================
ENGINE_VERSION: str = "azner-1.0.0"
REPORT_SCHEMA_VERSION: str = "recognition-report-v1"

# =============================================================================
# Matcher priority (aggregation order, most specific first)
# =============================================================================
# Candidates are concatenated in this order; the position of a candidate in
# the aggregated list is the last tie-break of the overlap resolver.
MATCHER_PRIORITY: Tuple[EntityType, ...] = (
    EntityType.URL,
    EntityType.EMAIL,
    EntityType.IBAN,
    EntityType.LICENSE_PLATE,
    EntityType.PHONE,
    EntityType.FIN,
    EntityType.VOEN,
)

# =============================================================================
# URL post-processing
# =============================================================================
# Trailing characters that end a sentence rather than a URL.
URL_TRAILING_PUNCTUATION: bytes = b".,;:!?)]}>"

# =============================================================================
# Input decoding
# =============================================================================
# str input may carry lone surrogates; bytes input may be malformed UTF-8.
STR_ENCODING_ERRORS: str = "surrogatepass"
BYTES_DECODING_ERRORS: str = "surrogateescape"
