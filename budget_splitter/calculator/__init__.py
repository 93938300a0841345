"""Calculator module - budget allocation."""

from .allocation import AllocationEngine, round_half_away, split_budget

__all__ = ["AllocationEngine", "round_half_away", "split_budget"]
