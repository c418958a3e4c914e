"""Tests for the SQLite credential store directly."""

import sqlite3
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from keyhub.core.types import Credential
from keyhub.exceptions import DuplicateToken, InfrastructureError
from keyhub.storage import CredentialStore
from keyhub.storage.sqlite_backend import SQLiteBackend


@pytest.fixture()
def backend(tmp_path: Path) -> SQLiteBackend:
    return SQLiteBackend(tmp_path / "backend_test.db")


def _cred(token: str = "tok", owner_id: str = "u1", **kw) -> Credential:
    kw.setdefault("display_name", "key")
    return Credential(token=token, owner_id=owner_id, **kw)


class TestSQLiteBackend:
    def test_satisfies_protocol(self, backend: SQLiteBackend):
        assert isinstance(backend, CredentialStore)

    def test_protocol_needs_only_crud_and_lookup(self):
        class MinimalStore:
            def insert(self, record): ...
            def get(self, credential_id, owner_id): ...
            def list_by_owner(self, owner_id): ...
            def update(self, credential_id, owner_id, /, **fields): ...
            def delete(self, credential_id, owner_id): ...
            def find_by_token(self, token): ...

        assert isinstance(MinimalStore(), CredentialStore)

    def test_insert_assigns_id(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1"))
        assert created.id is not None
        assert len(created.id) == 36  # UUID format

    def test_insert_and_get(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1", display_name="hello", kind="dev", usage_counter=3))
        found = backend.get(created.id, "u1")
        assert found == created

    def test_get_is_owner_scoped(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1", owner_id="alice"))
        assert backend.get(created.id, "bob") is None

    def test_duplicate_token(self, backend: SQLiteBackend):
        backend.insert(_cred("same", owner_id="alice"))
        with pytest.raises(DuplicateToken):
            backend.insert(_cred("same", owner_id="bob"))
        assert backend.list_by_owner("bob") == []

    def test_list_newest_first(self, backend: SQLiteBackend):
        now = datetime.now(timezone.utc)
        backend.insert(_cred("old", created_at=now - timedelta(days=2)))
        backend.insert(_cred("new", created_at=now))
        backend.insert(_cred("mid", created_at=now - timedelta(days=1)))
        assert [c.token for c in backend.list_by_owner("u1")] == ["new", "mid", "old"]

    def test_list_ties_broken_by_insertion(self, backend: SQLiteBackend):
        now = datetime.now(timezone.utc)
        backend.insert(_cred("first", created_at=now))
        backend.insert(_cred("second", created_at=now))
        assert [c.token for c in backend.list_by_owner("u1")] == ["second", "first"]

    def test_list_by_owner_isolation(self, backend: SQLiteBackend):
        backend.insert(_cred("a", owner_id="alice"))
        backend.insert(_cred("b", owner_id="bob"))
        keys = backend.list_by_owner("alice")
        assert len(keys) == 1
        assert keys[0].owner_id == "alice"

    def test_update(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1"))
        updated = backend.update(created.id, "u1", display_name="renamed", usage_counter=7)
        assert updated.display_name == "renamed"
        assert updated.usage_counter == 7
        assert updated.token == "t1"
        assert updated.created_at == created.created_at

    def test_update_foreign_owner(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1", owner_id="alice"))
        assert backend.update(created.id, "bob", display_name="stolen") is None
        assert backend.get(created.id, "alice").display_name == "key"

    def test_update_without_fields_returns_record(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1"))
        assert backend.update(created.id, "u1") == created
        assert backend.update("missing", "u1") is None

    def test_update_token_clash(self, backend: SQLiteBackend):
        backend.insert(_cred("taken"))
        other = backend.insert(_cred("mine"))
        with pytest.raises(DuplicateToken):
            backend.update(other.id, "u1", token="taken")
        assert backend.get(other.id, "u1").token == "mine"

    def test_update_rejects_immutable_column(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1"))
        with pytest.raises(ValueError):
            backend.update(created.id, "u1", owner_id="bob")

    def test_delete(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1"))
        assert backend.delete(created.id, "u1") is True
        assert backend.get(created.id, "u1") is None
        assert backend.delete(created.id, "u1") is False

    def test_delete_foreign_owner(self, backend: SQLiteBackend):
        created = backend.insert(_cred("t1", owner_id="alice"))
        assert backend.delete(created.id, "bob") is False
        assert backend.get(created.id, "alice") is not None

    def test_find_by_token_ignores_owner(self, backend: SQLiteBackend):
        created = backend.insert(_cred("secret", owner_id="alice"))
        assert backend.find_by_token("secret") == created
        assert backend.find_by_token("unknown") is None

    def test_data_survives_reopen(self, tmp_path: Path):
        path = tmp_path / "persist.db"
        created = SQLiteBackend(path).insert(_cred("t1"))
        assert SQLiteBackend(path).find_by_token("t1") == created

    def test_storage_failure_is_infrastructure_error(self, backend: SQLiteBackend):
        with sqlite3.connect(str(backend.db_path)) as conn:
            conn.execute("DROP TABLE api_keys")
        conn.close()
        with pytest.raises(InfrastructureError):
            backend.find_by_token("anything")
