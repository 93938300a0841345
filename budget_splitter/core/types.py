"""Type definitions and enums for the budget splitter."""

from enum import Enum


class InputKind(str, Enum):
    """What an incoming message was classified as."""

    CATEGORIES_JSON = "categories_json"
    CATEGORIES_YAML = "categories_yaml"
    SPLIT_REQUEST = "split_request"
    UNRECOGNIZED = "unrecognized"

    @property
    def is_category_definition(self) -> bool:
        """True for both structured category formats."""
        return self in (InputKind.CATEGORIES_JSON, InputKind.CATEGORIES_YAML)


class CategoryFormat(str, Enum):
    """Serialization formats accepted for category definitions."""

    JSON = "json"
    YAML = "yaml"

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        return self.value.upper()


class Outcome(str, Enum):
    """Result of processing one message."""

    CATEGORIES_UPDATED = "categories_updated"
    SPLIT = "split"
    NO_CATEGORIES = "no_categories"
    UNRECOGNIZED = "unrecognized"


# Telegram ids are ints; the store keys by str(user_id)
UserID = int | str
