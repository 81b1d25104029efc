"""In-memory key-value store for development and testing."""

import logging
from typing import Dict, Optional

from quotebook.repositories.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """
    A dict-backed key-value store.

    ``available`` can be switched off to simulate a context with no storage.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None, available: bool = True):
        self.data: Dict[str, str] = dict(initial or {})
        self.available = available
        self.write_count = 0
        logger.info(f"Initialized in-memory key-value store with {len(self.data)} keys")

    def is_available(self) -> bool:
        return self.available

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self.write_count += 1

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
