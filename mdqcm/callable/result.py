"""CallableResult model for the mdqcm callable protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

Operation = Literal["parse", "parse_structured", "serialize"]


class ConversionStats(BaseModel):
    """Counts describing one conversion."""

    questions: int = 0
    answers: int = 0
    total_score: int = 0
    multiple_answer_questions: int = 0


class CallableResult(BaseModel):
    """Result returned by mdqcm.execute().

    `items` always holds exactly one document: the questionnaire dict for
    the parse operations, or ``{"markdown": ..., "filename": ...}`` for
    serialize.

    Attributes:
        schema_version: Version of the CallableResult schema.
        operation: The operation that produced this result.
        items: Produced documents (inline payload).
        stats: Conversion statistics.
    """

    schema_version: str = "1.0"
    operation: Operation
    items: list[dict]
    stats: ConversionStats = Field(default_factory=ConversionStats)

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_single_item(self) -> CallableResult:
        """Ensure the payload holds exactly one document."""
        if len(self.items) != 1:
            raise ValueError(f"Expected exactly one item, got {len(self.items)}")
        return self

    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return {
            "schema_version": self.schema_version,
            "operation": self.operation,
            "items": self.items,
            "stats": self.stats.model_dump(),
        }
