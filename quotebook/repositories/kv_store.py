"""
Key-value storage backends for the record stores.

Each document type keeps its whole collection as one serialized JSON blob
under a fixed key. This module provides the interchangeable backends that
hold those blobs: a directory of JSON files, Firestore, and (in
``quotebook.mocks``) an in-memory dict.
"""

import os
import logging
import tempfile
from typing import Optional

from google.cloud import firestore

from quotebook.config import (
    KV_COLLECTION_NAME, KV_VALUE_FIELD, DEFAULT_FIRESTORE_DATABASE_ID
)

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Interface shared by all storage backends."""

    def is_available(self) -> bool:
        """Whether the backend can currently be read from and written to."""
        return True

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class FileKeyValueStore(KeyValueStore):
    """Stores every key as ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        logger.info(f"Initialized FileKeyValueStore in {os.path.abspath(data_dir)}")

    def _get_path(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def is_available(self) -> bool:
        try:
            os.makedirs(self.data_dir, exist_ok=True)
        except OSError as e:
            logger.warning(f"Data directory {self.data_dir} is unavailable: {str(e)}")
            return False
        return os.access(self.data_dir, os.W_OK)

    def get(self, key: str) -> Optional[str]:
        path = self._get_path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            logger.error(f"Error reading {path}: {str(e)}")
            raise

    def set(self, key: str, value: str) -> None:
        """Write the value atomically so readers never see a half-written blob."""
        path = self._get_path(key)
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.data_dir)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
            logger.debug(f"Wrote {len(value)} characters to {path}")
        except OSError as e:
            logger.error(f"Error writing {path}: {str(e)}")
            raise

    def delete(self, key: str) -> None:
        path = self._get_path(key)
        try:
            if os.path.exists(path):
                os.remove(path)
                logger.info(f"Deleted {path}")
        except OSError as e:
            logger.error(f"Error deleting {path}: {str(e)}")
            raise


class FirestoreKeyValueStore(KeyValueStore):
    """Stores every key as one Firestore document holding the blob in a single field."""

    def __init__(self, project_id: str = None, database_id: str = None, collection_prefix: str = ""):
        """
        Initialize the Firestore backend.

        Args:
            project_id: Optional Firestore project ID (defaults to env variable)
            database_id: Optional Firestore database ID (defaults to env variable or '(default)')
            collection_prefix: Optional prefix for the collection (for testing)
        """
        self.project_id = project_id or os.environ.get("FIRESTORE_PROJECT_ID")
        if not self.project_id:
            raise ValueError("Firestore project ID not provided and FIRESTORE_PROJECT_ID env variable not set")

        self.database_id = database_id or os.environ.get("FIRESTORE_DATABASE_ID", DEFAULT_FIRESTORE_DATABASE_ID)

        self.db = firestore.Client(project=self.project_id, database=self.database_id)
        self.collection_prefix = collection_prefix
        logger.info(f"Initialized FirestoreKeyValueStore with project {self.project_id}, database {self.database_id}, prefix: '{collection_prefix}'")

    def _get_collection_name(self) -> str:
        """Get the full collection name with prefix."""
        return f"{self.collection_prefix}{KV_COLLECTION_NAME}"

    def _document(self, key: str):
        return self.db.collection(self._get_collection_name()).document(key)

    def get(self, key: str) -> Optional[str]:
        try:
            doc = self._document(key).get()
            if not doc.exists:
                return None
            return (doc.to_dict() or {}).get(KV_VALUE_FIELD)
        except Exception as e:
            logger.error(f"Error getting key {key} from {self._get_collection_name()}: {str(e)}")
            raise

    def set(self, key: str, value: str) -> None:
        try:
            self._document(key).set({KV_VALUE_FIELD: value})
            logger.debug(f"Set key {key} in {self._get_collection_name()}")
        except Exception as e:
            logger.error(f"Error setting key {key} in {self._get_collection_name()}: {str(e)}")
            raise

    def delete(self, key: str) -> None:
        try:
            self._document(key).delete()
            logger.info(f"Deleted key {key} from {self._get_collection_name()}")
        except Exception as e:
            logger.error(f"Error deleting key {key} from {self._get_collection_name()}: {str(e)}")
            raise


def create_kv_store(backend: str, data_dir: str = None, project_id: str = None,
                    database_id: str = None, collection_prefix: str = "") -> KeyValueStore:
    """
    Build the storage backend selected by name.

    Args:
        backend: "file", "memory" or "firestore"
        data_dir: Directory for the file backend
        project_id: Firestore project ID for the firestore backend
        database_id: Firestore database ID for the firestore backend
        collection_prefix: Firestore collection prefix

    Returns:
        A KeyValueStore instance
    """
    if backend == "file":
        if not data_dir:
            raise ValueError("data_dir is required for the file storage backend")
        return FileKeyValueStore(data_dir)
    if backend == "memory":
        # Imported here so the mocks package is only loaded when asked for
        from quotebook.mocks.kv_store import InMemoryKeyValueStore
        return InMemoryKeyValueStore()
    if backend == "firestore":
        return FirestoreKeyValueStore(
            project_id=project_id,
            database_id=database_id,
            collection_prefix=collection_prefix,
        )
    raise ValueError(f"Unknown storage backend: {backend}")
