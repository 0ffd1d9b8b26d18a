"""Claim and manifest schemas."""

import math
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


def to_percent(value: float) -> int:
    """Round a [0, 1] fraction to a whole percentage, halves rounding up."""
    return int(math.floor(value * 100 + 0.5))


class Claim(BaseModel):
    """A single factual assertion with its confidence and evidence link.

    Claims are frozen: once a manifest is loaded nothing downstream may
    change them.
    """

    id: str
    title: str
    confidence: float = Field(ge=0.0, le=1.0)
    grade: Optional[str] = None  # "A", "A+", "B-", ...
    domain: Optional[str] = None
    file: Optional[str] = None  # evidence reference, never interpreted

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Manifests may use integer ids; they join with string DOM attributes."""
        if isinstance(v, bool):
            raise ValueError("Claim id must be a string or integer")
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("confidence", mode="before")
    @classmethod
    def numeric_confidence(cls, v: Any) -> Any:
        """Only JSON numbers count; booleans and numeric strings are malformed."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"Confidence must be a number, got {type(v).__name__}")
        return v

    @field_validator("confidence")
    @classmethod
    def finite_confidence(cls, v: float) -> float:
        if math.isnan(v):
            raise ValueError("Confidence must be a number")
        return v

    @property
    def confidence_percent(self) -> int:
        return to_percent(self.confidence)

    @property
    def grade_display(self) -> str:
        return self.grade or "N/A"

    @property
    def grade_slug(self) -> str:
        """CSS-safe grade token: ``A+`` becomes ``aplus``."""
        if not self.grade:
            return "na"
        return self.grade.replace("+", "plus", 1).lower()

    def qualifies(self, threshold: float) -> bool:
        return self.confidence >= threshold


class Manifest(BaseModel):
    """Static manifest document: an ordered list of claims."""

    claims: List[Claim]

    model_config = {"extra": "ignore"}
