"""
Unit tests for KeyValueRepository

Runs against an in-memory SQLite database; failure paths use a mocked session.
"""
import pytest
from unittest.mock import Mock
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from brandhub.core.repositories.kv_repo import KeyValueRepository
from brandhub.core.domain.exceptions import PersistenceError
from brandhub.models import Setting


class TestKeyValueRepository:
    def test_get_missing(self, kv_repo):
        assert kv_repo.get("missing") is None

    def test_put_then_get(self, kv_repo):
        kv_repo.put("brandHub_theme", "light")
        assert kv_repo.get("brandHub_theme") == "light"

    def test_put_overwrites(self, kv_repo, test_session):
        kv_repo.put("k", "one")
        kv_repo.put("k", "two")
        assert kv_repo.get("k") == "two"
        assert test_session.query(Setting).count() == 1

    def test_put_is_committed(self, kv_repo, test_engine):
        kv_repo.put("k", "v")
        other = Session(bind=test_engine)
        try:
            assert other.query(Setting).filter_by(key="k").first().value == "v"
        finally:
            other.close()

    def test_delete(self, kv_repo):
        kv_repo.put("k", "v")
        assert kv_repo.delete("k") is True
        assert kv_repo.get("k") is None
        assert kv_repo.delete("k") is False


class TestKeyValueRepositoryFailures:
    @pytest.fixture
    def failing_session(self):
        session = Mock(spec=Session)
        session.query.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))
        return session

    def test_put_failure_raises_persistence_error(self, failing_session):
        repo = KeyValueRepository(failing_session)
        with pytest.raises(PersistenceError, match="Failed to write 'k'"):
            repo.put("k", "v")
        failing_session.rollback.assert_called_once()

    def test_get_failure_raises_persistence_error(self, failing_session):
        repo = KeyValueRepository(failing_session)
        with pytest.raises(PersistenceError, match="Failed to read 'k'"):
            repo.get("k")
        failing_session.rollback.assert_called_once()
