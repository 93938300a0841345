"""
JSON-based storage for per-user budget categories.

The whole store lives in memory and is mirrored to a single JSON document
after every successful update:

    {"<user_id>": {"Food": 50.0, "Rent": 30.0}, ...}

Writes go to a temporary file first and are swapped in with os.replace,
so a crash mid-write never leaves a truncated cache behind.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from ..core.config import DEFAULT_CACHE_FILE
from ..core.exceptions import EmptyCategorySetError
from ..core.models import CategorySet
from ..core.types import UserID

logger = logging.getLogger(__name__)


class CategoryStore:
    """
    Per-user category sets with best-effort persistence.

    Usage:
        store = CategoryStore(Path("data/cache.json"))
        store.load()

        store.set(42, {"Food": 50, "Rent": 30})
        food_and_rent = store.get(42)
    """

    def __init__(self, cache_file: Optional[Path] = None):
        """Initialize store backed by cache_file (not read until load())."""
        self.cache_file = Path(cache_file) if cache_file else DEFAULT_CACHE_FILE
        self._categories: dict[str, CategorySet] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _key(user_id: UserID) -> str:
        return str(user_id)

    def get(self, user_id: UserID) -> Optional[CategorySet]:
        """Return the user's categories, or None if never set."""
        with self._lock:
            return self._categories.get(self._key(user_id))

    def set(
        self,
        user_id: UserID,
        weights: Union[CategorySet, Mapping[str, float]],
    ) -> CategorySet:
        """
        Replace the user's categories and persist the store.

        Raises:
            EmptyCategorySetError: if weights is empty; the existing set is kept
        """
        key = self._key(user_id)
        if isinstance(weights, CategorySet):
            categories = weights
        else:
            if not weights:
                raise EmptyCategorySetError(key)
            categories = CategorySet(weights=dict(weights))

        with self._lock:
            self._categories[key] = categories
            self.persist()

        return categories

    def users(self) -> list[str]:
        """List all user ids with stored categories."""
        with self._lock:
            return list(self._categories)

    def __len__(self) -> int:
        with self._lock:
            return len(self._categories)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return str(user_id) in self._categories

    def to_dict(self) -> dict[str, dict[str, float]]:
        """Snapshot of the store as plain dicts for JSON serialization."""
        with self._lock:
            return {
                user_id: dict(categories.weights)
                for user_id, categories in self._categories.items()
            }

    def persist(self) -> bool:
        """
        Write the whole store to the cache file, replacing prior content.

        Failures are logged and reported by the return value only; the
        in-memory store stays authoritative.
        """
        with self._lock:
            data = self.to_dict()
            tmp_path = None
            try:
                self.cache_file.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=self.cache_file.parent,
                    prefix=f".{self.cache_file.name}.",
                    suffix=".tmp",
                )
                tmp_path = Path(tmp_name)
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.cache_file)
                tmp_path = None
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Error writing cache file {self.cache_file}: {e}")
                return False
            finally:
                if tmp_path is not None:
                    tmp_path.unlink(missing_ok=True)

        logger.debug(f"Saved categories for {len(data)} users to {self.cache_file}")
        return True

    def load(self) -> int:
        """
        Replace the in-memory store with the cache file's content.

        A missing or malformed file yields an empty store. Returns the
        number of users loaded.
        """
        with self._lock:
            self._categories = {}

            try:
                with open(self.cache_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except FileNotFoundError:
                logger.info("No cache file found, starting fresh")
                return 0
            except (OSError, ValueError) as e:
                logger.warning(f"Error decoding cache {self.cache_file}: {e}")
                return 0

            if not isinstance(data, dict):
                logger.warning(
                    f"Error decoding cache {self.cache_file}: expected an object, "
                    f"got {type(data).__name__}"
                )
                return 0

            for user_id, weights in data.items():
                try:
                    self._categories[str(user_id)] = CategorySet(weights=weights)
                except ValidationError as e:
                    logger.warning(f"Skipping invalid categories for user {user_id}: {e}")

            logger.info(f"Loaded categories for {len(self._categories)} users from cache")
            return len(self._categories)
