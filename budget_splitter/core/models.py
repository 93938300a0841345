"""Pydantic data models for the budget splitter.

Category sets and split results are immutable (frozen) after creation so
the allocation engine can only ever derive new values from them.
"""

import math
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from .types import CategoryFormat, InputKind, Outcome


class CategorySet(BaseModel):
    """Named budget categories with relative weights.

    Weights keep their definition order; the first category is the one
    that absorbs rounding slack when splitting.
    """

    weights: dict[str, float]

    model_config = {"frozen": True}

    @field_validator("weights", mode="before")
    @classmethod
    def _check_weights(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            raise ValueError("weights must be a mapping of name to number")
        if not value:
            raise ValueError("a category set needs at least one category")
        for name, weight in value.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"invalid category name: {name!r}")
            # bool is an int subclass
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise ValueError(f"weight for {name!r} is not a number")
            try:
                finite = math.isfinite(weight)
            except OverflowError:
                raise ValueError(f"weight for {name!r} is too large") from None
            if not finite:
                raise ValueError(f"weight for {name!r} is not finite")
        return value

    @property
    def names(self) -> tuple[str, ...]:
        """Category names in definition order."""
        return tuple(self.weights)

    @property
    def total_weight(self) -> float:
        """Sum of all weights."""
        return sum(self.weights.values())

    @property
    def is_allocatable(self) -> bool:
        """Check if the set can be split (positive total weight)."""
        return self.total_weight > 0

    def __len__(self) -> int:
        return len(self.weights)


class SplitResult(BaseModel):
    """Integer portions per category for one split request."""

    total: int
    portions: dict[str, int]
    adjusted_category: str
    diff: int = 0

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_reconciled(self) -> "SplitResult":
        if sum(self.portions.values()) != self.total:
            raise ValueError(
                f"portions sum to {sum(self.portions.values())}, expected {self.total}"
            )
        if self.adjusted_category not in self.portions:
            raise ValueError(f"unknown adjusted category: {self.adjusted_category}")
        return self


class Classification(BaseModel):
    """How a raw message was interpreted."""

    kind: InputKind
    categories: CategorySet | None = None
    amount: float | None = None

    model_config = {"frozen": True}

    @property
    def source_format(self) -> CategoryFormat | None:
        """Format the categories were parsed from, if any."""
        if self.kind == InputKind.CATEGORIES_JSON:
            return CategoryFormat.JSON
        if self.kind == InputKind.CATEGORIES_YAML:
            return CategoryFormat.YAML
        return None


class AssistantReply(BaseModel):
    """Outcome of processing one (user, text) pair."""

    outcome: Outcome
    source_format: CategoryFormat | None = None
    split: SplitResult | None = None

    model_config = {"frozen": True}
