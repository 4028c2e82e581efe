"""
Typed Pydantic models for the recognition report contract.

The report is the serialized form handed to downstream tooling; entities
inside it mirror azner.models.entity.Entity field by field, with lone
surrogates in the text written as backslash escapes.
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from azner.models.entity import Entity, EntityType


class RecognizedEntity(BaseModel):
    """Serialized entity. Offsets are UTF-8 byte offsets into the input."""

    text: str = Field(..., min_length=1)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=1)
    type: EntityType
    labeled: bool = False

    @model_validator(mode="after")
    def validate_span(self) -> "RecognizedEntity":
        if self.start >= self.end:
            raise ValueError("start must be strictly less than end")
        return self

    @classmethod
    def from_entity(cls, entity: Entity) -> "RecognizedEntity":
        return cls(**entity.to_dict())


class ProcessingMetadata(BaseModel):
    """Audit data for a single recognize() call."""

    engine_version: str
    input_bytes: int = Field(..., ge=0)
    candidates_found: int = Field(..., ge=0)
    entities_recognized: int = Field(..., ge=0)
    entities_by_type: Dict[str, int] = Field(default_factory=dict)
    recognition_duration_ms: int = Field(..., ge=0)

    @field_validator("entities_by_type")
    @classmethod
    def validate_type_names(cls, v: Dict[str, int]) -> Dict[str, int]:
        allowed = {t.value for t in EntityType}
        unknown = set(v) - allowed
        if unknown:
            raise ValueError(f"entities_by_type has unknown types {sorted(unknown)}")
        return v


class RecognitionReport(BaseModel):
    """Resolved entities plus processing metadata."""

    entities: List[RecognizedEntity]
    processing_metadata: ProcessingMetadata

    @field_validator("entities")
    @classmethod
    def validate_ordering(cls, v: List[RecognizedEntity]) -> List[RecognizedEntity]:
        for prev, cur in zip(v, v[1:]):
            if cur.start < prev.end:
                raise ValueError(
                    f"entities must be sorted and non-overlapping: "
                    f"[{prev.start},{prev.end}] then [{cur.start},{cur.end}]"
                )
        return v

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
