"""
Entity model for recognized spans (URL / Email / IBAN / Phone / FIN / VOEN ...).

Offsets are UTF-8 byte offsets into the scanned input, not character offsets.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class EntityType(str, Enum):
    """Closed set of entity types the engine recognizes."""

    PHONE = "Phone"
    EMAIL = "Email"
    URL = "URL"
    IBAN = "IBAN"
    LICENSE_PLATE = "LicensePlate"
    FIN = "FIN"
    VOEN = "VOEN"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Entity:
    """A single recognized span with its type and keyword confidence."""

    text: str
    start: int              # byte offset, inclusive
    end: int                # byte offset, exclusive
    type: EntityType
    labeled: bool = False   # FIN/VOEN found right after their keyword

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")
        if self.start >= self.end:
            raise ValueError(
                f"start must be strictly less than end, got [{self.start},{self.end}]"
            )

    def overlaps(self, other: "Entity") -> bool:
        """Check if two entities have overlapping spans."""
        return not (self.end <= other.start or other.end <= self.start)

    def span_length(self) -> int:
        return self.end - self.start

    def char_span(self, source: str) -> Tuple[int, int]:
        """
        Translate the byte span into character offsets of ``source``.

        ``source`` must be the string the entity was recognized in, so that
        ``source[cs:ce] == entity.text``.
        """
        encoded = source.encode("utf-8", "surrogatepass")
        char_start = len(encoded[: self.start].decode("utf-8", "surrogatepass"))
        return char_start, char_start + len(self.text)

    def report_text(self) -> str:
        """
        ``text`` in a form that always encodes as UTF-8.

        Malformed input leaves lone surrogates in ``text``; they are written
        as backslash escapes (``"\\udcff"``).
        """
        return self.text.encode("utf-8", "backslashreplace").decode("utf-8")

    def to_dict(self) -> dict:
        return {
            "text": self.report_text(),
            "start": self.start,
            "end": self.end,
            "type": self.type.value,
            "labeled": self.labeled,
        }

    def __repr__(self) -> str:
        flag = ", labeled" if self.labeled else ""
        return f"Entity('{self.text}', {self.type.value}, [{self.start},{self.end}]{flag})"
