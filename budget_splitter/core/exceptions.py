"""Custom exceptions for the budget splitter."""


class BudgetSplitterError(Exception):
    """Base exception for all budget splitter errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(BudgetSplitterError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key


class EmptyCategorySetError(BudgetSplitterError):
    """Raised when an empty category set would be stored for a user."""

    def __init__(self, user_id: str):
        message = f"Refusing to store an empty category set for user {user_id}"
        super().__init__(message, {"user_id": user_id})
        self.user_id = user_id


class AllocationError(BudgetSplitterError):
    """Raised when a split cannot be computed for the given categories."""

    def __init__(self, message: str, total_weight: float | None = None):
        super().__init__(message, {"total_weight": total_weight})
        self.total_weight = total_weight
