"""Budget assistant - processes one chat message end to end.

Coordinates the message flow:
1. Classify the text (JSON categories, YAML categories, amount)
2. Store new categories for the user, or
3. Split the amount across the user's stored categories
"""

import logging
from typing import Optional

from .calculator.allocation import AllocationEngine
from .classifier.classifier import FormatClassifier
from .core.exceptions import EmptyCategorySetError
from .core.models import AssistantReply, Classification
from .core.types import InputKind, Outcome, UserID
from .storage.category_store import CategoryStore

logger = logging.getLogger(__name__)


class BudgetAssistant:
    """
    Transport-independent message handler.

    Usage:
        assistant = BudgetAssistant(store)
        reply = assistant.process(42, '{"Food": 50, "Rent": 50}')
        reply = assistant.process(42, "1000")
    """

    def __init__(
        self,
        store: CategoryStore,
        classifier: Optional[FormatClassifier] = None,
        engine: Optional[AllocationEngine] = None,
    ):
        self.store = store
        self.classifier = classifier or FormatClassifier()
        self.engine = engine or AllocationEngine()

    def process(self, user_id: UserID, text: str) -> AssistantReply:
        """Handle one message from user_id."""
        classification = self.classifier.classify(text)

        if classification.kind.is_category_definition:
            reply = self._update_categories(user_id, classification)
            if reply is not None:
                return reply
            # Rejected by the store: treat the text as an amount or nothing
            classification = self.classifier.classify_amount(text)

        if classification.kind == InputKind.SPLIT_REQUEST:
            return self._split(user_id, classification.amount)

        logger.info(f"Sent help message to user {user_id}")
        return AssistantReply(outcome=Outcome.UNRECOGNIZED)

    def _update_categories(
        self,
        user_id: UserID,
        classification: Classification,
    ) -> Optional[AssistantReply]:
        fmt = classification.source_format
        try:
            self.store.set(user_id, classification.categories)
        except EmptyCategorySetError as e:
            logger.warning(e.message)
            return None

        logger.info(f"Updated categories for user {user_id} via {fmt.display_name}")
        return AssistantReply(outcome=Outcome.CATEGORIES_UPDATED, source_format=fmt)

    def _split(self, user_id: UserID, amount: float) -> AssistantReply:
        categories = self.store.get(user_id)
        if categories is None or not categories.is_allocatable:
            logger.info(f"User {user_id} tried splitting budget without usable categories")
            return AssistantReply(outcome=Outcome.NO_CATEGORIES)

        split = self.engine.split(categories, amount)
        logger.info(
            f"Processed budget split for user {user_id} with int amount: {split.total}"
        )
        return AssistantReply(outcome=Outcome.SPLIT, split=split)
