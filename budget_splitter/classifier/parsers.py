"""Candidate parsers for incoming messages.

Each parser is a pure function of the message text and returns None when
the text is not in its format, so the classifier can fall through to the
next one. Handles inputs like:
- '{"Food": 50, "Rent": 30, "Other": 20}'  (JSON)
- 'Food: 50\\nRent: 30\\nOther: 20'         (YAML)
- 'Food:50\\nRent:30'                       (YAML missing the space)
- '125000' / '-3.5' / '1e5'                (amount)
"""

import json
import logging
import math
import re
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from ..core.models import CategorySet

logger = logging.getLogger(__name__)

# A colon glued to a digit ("Food:50") makes YAML read one plain scalar.
COLON_DIGIT_PATTERN = re.compile(r":(\d)")

AMOUNT_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite JSON constant: {name}")


def _to_category_set(data: Any) -> Optional[CategorySet]:
    """Build a CategorySet from a decoded mapping, or None if unusable."""
    if not isinstance(data, dict) or not data:
        return None
    try:
        return CategorySet(weights=data)
    except ValidationError as e:
        logger.debug(f"Decoded mapping is not a category set: {e.error_count()} errors")
        return None


def parse_json_categories(text: str) -> Optional[CategorySet]:
    """Parse a JSON object of name -> number."""
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return None
    return _to_category_set(data)


def normalize_yaml(text: str) -> str:
    """Insert a space after every colon directly followed by a digit."""
    return COLON_DIGIT_PATTERN.sub(r": \1", text)


def parse_yaml_categories(text: str) -> Optional[CategorySet]:
    """Parse a YAML mapping of name -> number, after normalize_yaml()."""
    try:
        data = yaml.safe_load(normalize_yaml(text))
    except yaml.YAMLError:
        return None

    if not isinstance(data, dict):
        return None

    weights: dict[str, Any] = {}
    for key, value in data.items():
        # YAML allows non-string keys such as `2024: 10`
        if isinstance(key, (dict, list)) or key is None:
            return None
        weights[str(key)] = value

    return _to_category_set(weights)


def parse_amount(text: str) -> Optional[float]:
    """Parse the whole text as a plain decimal number."""
    text = text.strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        return None
    try:
        amount = float(text)
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount
