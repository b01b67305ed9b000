"""
Key/Value Repository

Durable key/value store over the `settings` table. Every write replaces the
whole value under its key and is committed immediately (last writer wins).
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..domain.exceptions import PersistenceError
from ...models import Setting

logger = logging.getLogger(__name__)


class KeyValueRepository:
    """
    Repository cho durable key/value entries

    Handles:
    - get / put / delete of raw string values
    - Commit on write, rollback on failure
    """

    def __init__(self, session: Session):
        """
        Initialize repository with database session

        Args:
            session: SQLAlchemy session, owned by the caller
        """
        self.session = session

    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under key

        Returns:
            Stored string, or None when no entry exists

        Raises:
            PersistenceError: If the store could not be read
        """
        try:
            row = self.session.query(Setting).filter_by(key=key).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read '{key}': {e}")
            self.rollback()
            raise PersistenceError(f"Failed to read '{key}': {e}") from e
        return row.value if row else None

    def put(self, key: str, value: str):
        """
        Overwrite the value stored under key

        Raises:
            PersistenceError: If the write could not be committed
        """
        try:
            row = self.session.query(Setting).filter_by(key=key).first()
            if row is None:
                self.session.add(Setting(key=key, value=value))
            else:
                row.value = value
            self.commit()
        except SQLAlchemyError as e:
            self.rollback()
            raise PersistenceError(f"Failed to write '{key}': {e}") from e

    def delete(self, key: str) -> bool:
        """
        Remove the entry under key

        Returns:
            True if deleted, False if not found
        """
        try:
            row = self.session.query(Setting).filter_by(key=key).first()
            if row is None:
                return False
            self.session.delete(row)
            self.commit()
            return True
        except SQLAlchemyError as e:
            self.rollback()
            raise PersistenceError(f"Failed to delete '{key}': {e}") from e

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
