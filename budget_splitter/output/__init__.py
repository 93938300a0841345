"""Output formatting module."""

from .formatters import (
    FEEDBACK_EMPTY_MESSAGE,
    FEEDBACK_SENT_MESSAGE,
    HELP_MESSAGE,
    NO_CATEGORIES_MESSAGE,
    START_MESSAGE,
    JSONFormatter,
    OutputFormatter,
    TableFormatter,
    TextFormatter,
    format_feedback,
    format_reply,
    format_split,
)

__all__ = [
    "FEEDBACK_EMPTY_MESSAGE",
    "FEEDBACK_SENT_MESSAGE",
    "HELP_MESSAGE",
    "NO_CATEGORIES_MESSAGE",
    "START_MESSAGE",
    "JSONFormatter",
    "OutputFormatter",
    "TableFormatter",
    "TextFormatter",
    "format_feedback",
    "format_reply",
    "format_split",
]
