"""Core module - data models, types, configuration and exceptions."""

from .models import (
    AssistantReply,
    CategorySet,
    Classification,
    SplitResult,
)
from .types import (
    CategoryFormat,
    InputKind,
    Outcome,
    UserID,
)
from .exceptions import (
    AllocationError,
    BudgetSplitterError,
    ConfigurationError,
    EmptyCategorySetError,
)

__all__ = [
    # Models
    "AssistantReply",
    "CategorySet",
    "Classification",
    "SplitResult",
    # Types
    "CategoryFormat",
    "InputKind",
    "Outcome",
    "UserID",
    # Exceptions
    "AllocationError",
    "BudgetSplitterError",
    "ConfigurationError",
    "EmptyCategorySetError",
]
