"""Message classification module.

Turns raw chat text into a category definition or a split request.
"""

from .classifier import FormatClassifier
from .parsers import (
    normalize_yaml,
    parse_amount,
    parse_json_categories,
    parse_yaml_categories,
)

__all__ = [
    "FormatClassifier",
    "normalize_yaml",
    "parse_amount",
    "parse_json_categories",
    "parse_yaml_categories",
]
