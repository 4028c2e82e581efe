"""
Shared test fixtures for the recognition test suite.
"""
import pytest

from azner.config import settings
from azner.models.entity import Entity, EntityType


# ==========================================================================
# Input texts
# ==========================================================================

@pytest.fixture
def mixed_text():
    """One of every entity type in an Azerbaijani sentence."""
    return (
        "Müraciət: info@gov.az, https://e-gov.az/xidmet. "
        "Tel: 012 555 44 33, +994 55 987 65 43. "
        "IBAN AZ21NABZ00000000137010001944, maşın 10-AB-123, "
        "FIN: 5ARPXK2, VÖEN 1402345678."
    )


@pytest.fixture
def fin_phone_text():
    return "FIN: 5ARPXK2, tel +994501234567"


@pytest.fixture
def iban_text():
    return "AZ21NABZ00000000137010001944"


@pytest.fixture
def plain_text():
    return "Salam, necəsiniz? Bu gün hava çox gözəldir."


@pytest.fixture
def adversarial_inputs():
    """Inputs shaped to provoke backtracking in naive patterns."""
    size = 100_000
    return [
        "a" * size,
        "a." * (size // 2) + "@",
        "a@" * (size // 2),
        "a@" + "b" * size,
        "a@b." * (size // 4),
        "x" * size + "@" + "y." * (size // 2),
        "1" * size,
        "0 " * (size // 2),
        "+994" * (size // 4),
        "http://" + "h" * size,
        "FIN: " * (size // 5),
        "VÖEN " * (size // 5),
        "AZ" * (size // 2),
        "ə" * size,
    ]


# ==========================================================================
# Candidate entities
# ==========================================================================

@pytest.fixture
def iban_with_inner_candidates():
    """An IBAN candidate plus shorter candidates starting inside it."""
    return [
        Entity("AZ21NABZ00000000137010001944", 0, 28, EntityType.IBAN),
        Entity("0000000013", 8, 18, EntityType.VOEN),
        Entity("AZ21NAB", 0, 7, EntityType.FIN),
    ]


# ==========================================================================
# Settings
# ==========================================================================

@pytest.fixture
def redaction_disabled(monkeypatch):
    monkeypatch.setattr(settings, "PII_REDACTION_ENABLED", False)


@pytest.fixture
def redaction_enabled(monkeypatch):
    monkeypatch.setattr(settings, "PII_REDACTION_ENABLED", True)
