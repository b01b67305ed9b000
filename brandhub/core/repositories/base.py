"""
Base Snapshot Repository

Abstract base class for values persisted as one full snapshot under a stable
key. Reading is all-or-nothing: a missing or undecodable snapshot reads as
None and the caller falls back to its defaults.

Subclasses must implement:
- serialize
- deserialize
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from .kv_repo import KeyValueRepository

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseSnapshotRepository(ABC, Generic[T]):
    """
    Generic[T]: T is the domain value stored under `key`
    (list of Brand, OperatorProfile, Theme)
    """

    key: str = ""

    def __init__(self, store: KeyValueRepository):
        self.store = store

    @abstractmethod
    def serialize(self, value: T) -> str:
        """Encode the whole value as a string"""
        pass

    @abstractmethod
    def deserialize(self, raw: str) -> T:
        """
        Decode a stored string

        Raises:
            ValueError (or a subclass): If the snapshot is corrupt
        """
        pass

    def load(self) -> Optional[T]:
        """
        Read the snapshot

        Returns:
            Decoded value, or None when absent or corrupt

        Raises:
            PersistenceError: If the store itself could not be read. This is
                not treated as absent, so defaults never overwrite a real snapshot.
        """
        raw = self.store.get(self.key)
        if raw is None:
            logger.info(f"No snapshot stored under '{self.key}'")
            return None
        try:
            return self.deserialize(raw)
        except ValueError as e:
            logger.warning(f"Discarding unreadable snapshot '{self.key}': {e}")
            return None

    def save(self, value: T):
        """
        Overwrite the snapshot with the whole value

        Raises:
            PersistenceError: If the durable write failed
        """
        self.store.put(self.key, self.serialize(value))
        logger.debug(f"Snapshot '{self.key}' saved")
