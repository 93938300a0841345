"""Format classifier - decides what an incoming message means.

Candidate parsers are tried strictly in order and the first success wins:
JSON categories, YAML categories, then a plain amount.
"""

import logging
from typing import Callable, Optional

from ..core.models import CategorySet, Classification
from ..core.types import InputKind
from .parsers import parse_amount, parse_json_categories, parse_yaml_categories

logger = logging.getLogger(__name__)

CategoryParser = Callable[[str], Optional[CategorySet]]

DEFAULT_CATEGORY_PARSERS: list[tuple[InputKind, CategoryParser]] = [
    (InputKind.CATEGORIES_JSON, parse_json_categories),
    (InputKind.CATEGORIES_YAML, parse_yaml_categories),
]


class FormatClassifier:
    """Classifies raw message text as categories, an amount, or neither."""

    def __init__(
        self,
        category_parsers: Optional[list[tuple[InputKind, CategoryParser]]] = None,
    ):
        self.category_parsers = category_parsers or DEFAULT_CATEGORY_PARSERS

    def parse_categories(self, text: str) -> Optional[Classification]:
        """Try each category parser in order."""
        for kind, parser in self.category_parsers:
            categories = parser(text)
            if categories is not None:
                logger.debug(f"Parsed {len(categories)} categories as {kind.value}")
                return Classification(kind=kind, categories=categories)
        return None

    def classify(self, text: str) -> Classification:
        """
        Classify a message.

        Args:
            text: Raw message text

        Returns:
            Classification; kind is UNRECOGNIZED when nothing matched
        """
        text = text.strip()

        result = self.parse_categories(text)
        if result is not None:
            return result

        return self.classify_amount(text)

    def classify_amount(self, text: str) -> Classification:
        """Classify text as a split request, skipping the category parsers."""
        amount = parse_amount(text)
        if amount is not None:
            return Classification(kind=InputKind.SPLIT_REQUEST, amount=amount)

        return Classification(kind=InputKind.UNRECOGNIZED)
