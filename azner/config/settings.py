"""
Environment settings loaded from .env file.

Settings only affect logging; recognition results never depend on them.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Privacy ---
PII_REDACTION_ENABLED: bool = os.getenv("PII_REDACTION_ENABLED", "true").lower() == "true"
MAX_TEXT_LOG_CHARS: int = int(os.getenv("MAX_TEXT_LOG_CHARS", "80"))
