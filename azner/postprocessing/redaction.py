"""
Log redaction for recognized values.

Recognized entities are personal data (phones, national identifiers, IBANs),
so log records carry a masked form unless PII_REDACTION_ENABLED is false.
"""
from azner.config import settings


def redact_for_log(value: str) -> str:
    """
    Mask a value for logging, keeping only its first and last character.

    With redaction disabled the value is only truncated to MAX_TEXT_LOG_CHARS.
    """
    if not settings.PII_REDACTION_ENABLED:
        if len(value) > settings.MAX_TEXT_LOG_CHARS:
            return value[: settings.MAX_TEXT_LOG_CHARS] + "…"
        return value
    if len(value) <= 2:
        return "*" * len(value)
    return f"{value[0]}{'*' * min(len(value) - 2, settings.MAX_TEXT_LOG_CHARS)}{value[-1]}"
