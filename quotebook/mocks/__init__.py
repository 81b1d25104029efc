"""Stand-in components for development and tests."""

from quotebook.mocks.kv_store import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
