"""Allocation engine for splitting an amount across weighted categories.

All calculations use explicit formulas:
- Total = round(amount)
- Portion = round(Total × weight / Σ weights / 100) × 100
- Diff = Total - Σ portions, added to the first category

Rounding is half away from zero throughout.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from ..core.exceptions import AllocationError
from ..core.models import CategorySet, SplitResult

logger = logging.getLogger(__name__)

PORTION_STEP = 100


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    # Decimal(float) is exact, so this matches the float's true value
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


class AllocationEngine:
    """Splits amounts into round-hundred portions that sum exactly."""

    def __init__(self, step: int = PORTION_STEP):
        self.step = step

    def split(self, categories: CategorySet, amount: float) -> SplitResult:
        """
        Split amount across categories.

        Args:
            categories: Weighted categories; the first one absorbs rounding slack
            amount: Requested total, rounded to an integer before splitting

        Returns:
            SplitResult whose portions sum to round(amount)

        Raises:
            AllocationError: if the total weight is not positive
        """
        total_weight = categories.total_weight
        if total_weight <= 0:
            raise AllocationError(
                f"Cannot split across categories with total weight {total_weight}",
                total_weight=total_weight,
            )

        total = round_half_away(amount)

        portions: dict[str, int] = {}
        for name, weight in categories.weights.items():
            raw = total * (weight / total_weight)
            portions[name] = round_half_away(raw / self.step) * self.step

        first = categories.names[0]
        diff = total - sum(portions.values())
        portions[first] += diff
        logger.debug(f"Adjustment: diff={diff} added to {first}")

        return SplitResult(
            total=total,
            portions=portions,
            adjusted_category=first,
            diff=diff,
        )


def split_budget(categories: CategorySet, amount: float) -> SplitResult:
    """Split amount with the default hundred-step engine."""
    return AllocationEngine().split(categories, amount)
