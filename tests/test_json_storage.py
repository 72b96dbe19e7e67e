"""
Tests for the JSON document store against a temporary file.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.repositories.document_repository import DocumentRepository  # noqa: E402
from api.repositories.json_storage import DocumentStore, db_defaults  # noqa: E402


def test_missing_file_reads_as_empty_document(tmp_path):
    store = DocumentStore(tmp_path / "db.json")
    assert store.read_all() == {"users": [], "profiles": [], "sessions": []}
    assert not store.path.exists()


def test_initialize_writes_defaults_once(tmp_path):
    path = tmp_path / "nested" / "db.json"
    store = DocumentStore(path)
    store.initialize()
    assert json.loads(path.read_text(encoding="utf-8")) == {"users": [], "profiles": [], "sessions": []}


def test_legacy_document_gets_missing_collections(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps({"users": [{"id": "u1", "username": "bob"}], "profiles": []}), encoding="utf-8")
    db = DocumentStore(path).read_all()
    assert db["sessions"] == []
    assert db["users"][0]["username"] == "bob"


def test_empty_file_is_treated_as_missing(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("", encoding="utf-8")
    assert DocumentStore(path).read_all()["profiles"] == []


def test_db_defaults_replaces_non_list_collections():
    assert db_defaults({"users": None, "profiles": {}})["profiles"] == []
    assert db_defaults(None) == {"users": [], "profiles": [], "sessions": []}


def test_transaction_persists_on_success(tmp_path):
    path = tmp_path / "db.json"
    store = DocumentStore(path)
    with store.transaction() as db:
        DocumentRepository(db).add_user({"id": "u1", "username": "alice", "passwordHash": "x"})
    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert [u["id"] for u in on_disk["users"]] == ["u1"]
    assert not path.with_name("db.json.tmp").exists()


def test_transaction_does_not_persist_when_block_raises(tmp_path):
    path = tmp_path / "db.json"
    store = DocumentStore(path)
    store.initialize()
    with pytest.raises(RuntimeError):
        with store.transaction() as db:
            db["users"].append({"id": "u1"})
            raise RuntimeError("boom")
    assert json.loads(path.read_text(encoding="utf-8"))["users"] == []


def test_find_comment_returns_first_match_in_insertion_order():
    db = {
        "users": [],
        "sessions": [],
        "profiles": [
            {"id": "p1", "comments": [{"id": "c1", "username": "a", "text": "first"}]},
            {"id": "p2"},
            {"id": "p3", "comments": [{"id": "c1", "username": "b", "text": "dup"}]},
        ],
    }
    profile, comment = DocumentRepository(db).find_comment("c1")
    assert profile["id"] == "p1"
    assert comment["text"] == "first"
    assert DocumentRepository(db).find_comment("nope") == (None, None)
