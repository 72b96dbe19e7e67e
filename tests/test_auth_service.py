from __future__ import annotations

import dataclasses
import json
import sys
import threading
from pathlib import Path

import bcrypt
import pytest

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402
from api.core.security import hash_password, verify_password  # noqa: E402
from api.repositories.json_storage import DocumentStore  # noqa: E402
from api.services.auth_service import (  # noqa: E402
    AuthService,
    InvalidCredentialsError,
    RegistrationError,
    SessionInvalidError,
    UsernameTakenError,
)


@pytest.fixture()
def store(tmp_path, monkeypatch):
    """Aponta DATA_FILE para um arquivo temporário e reseta o cache de settings."""
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "db.json"))
    core_config.get_settings.cache_clear()
    yield DocumentStore(core_config.get_settings().data_file)
    core_config.get_settings.cache_clear()


def test_register_twice_keeps_single_user(store):
    svc = AuthService(store=store)
    first = svc.register("alice", "pw1")
    assert first.username == "alice"

    with pytest.raises(UsernameTakenError):
        svc.register("alice", "pw2")

    users = store.read_all()["users"]
    assert len(users) == 1
    assert users[0]["id"] == first.id
    assert users[0]["passwordHash"] != "pw1"
    assert "passwordHash" not in dataclasses.asdict(first)


def test_usernames_are_case_sensitive(store):
    svc = AuthService(store=store)
    svc.register("alice", "pw")
    svc.register("Alice", "pw")
    assert len(store.read_all()["users"]) == 2


def test_register_requires_username_and_password(store):
    svc = AuthService(store=store)
    with pytest.raises(RegistrationError):
        svc.register("alice", "")
    with pytest.raises(RegistrationError):
        svc.register(None, "pw")
    assert store.read_all()["users"] == []


def test_login_failures_are_indistinguishable(store):
    svc = AuthService(store=store)
    svc.register("alice", "pw1")

    with pytest.raises(InvalidCredentialsError) as wrong_pw:
        svc.login("alice", "pw2")
    with pytest.raises(InvalidCredentialsError) as unknown:
        svc.login("bob", "pw1")
    assert wrong_pw.value.message == unknown.value.message


def test_login_issues_session_that_resolves_to_user(store):
    svc = AuthService(store=store)
    user = svc.register("alice", "pw1")

    result = svc.login("alice", "pw1")
    assert (result.id, result.username) == (user.id, "alice")
    assert svc.resolve_token(result.token) == user.id

    svc.logout(result.token)
    assert svc.resolve_token(result.token) is None


def test_login_accepts_bcrypt_users_from_old_backend(store):
    # formato gravado pelo backend Node: bcrypt em "password", sem "sessions"
    legacy_hash = bcrypt.hashpw(b"pw1", bcrypt.gensalt(rounds=4)).decode("utf-8")
    store.path.write_text(
        json.dumps({"users": [{"id": "A", "username": "alice", "password": legacy_hash}], "profiles": []}),
        encoding="utf-8",
    )
    svc = AuthService(store=DocumentStore(store.path))

    with pytest.raises(InvalidCredentialsError):
        svc.login("alice", "wrong")
    assert svc.login("alice", "pw1").id == "A"

    # hash migrado para argon2 no primeiro login bem sucedido
    user = json.loads(store.path.read_text(encoding="utf-8"))["users"][0]
    assert user["passwordHash"].startswith("argon2$")
    assert "password" not in user
    assert svc.login("alice", "pw1").id == "A"


def test_verify_password_rejects_unknown_hash_formats():
    assert verify_password("secret", hash_password("secret"))
    assert not verify_password("secret", "plain-text-secret")


def test_concurrent_registrations_keep_username_unique(store):
    svc = AuthService(store=store)
    workers = 8
    barrier = threading.Barrier(workers)
    outcomes = []

    def attempt():
        barrier.wait()
        try:
            svc.register("same", "pw")
            outcomes.append("ok")
        except UsernameTakenError:
            outcomes.append("taken")

    threads = [threading.Thread(target=attempt) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["ok"] + ["taken"] * (workers - 1)
    assert len(store.read_all()["users"]) == 1
    assert len(json.loads(store.path.read_text(encoding="utf-8"))["users"]) == 1


def test_expired_session_does_not_resolve(store):
    svc = AuthService(store=store)
    svc.register("alice", "pw1")
    token = svc.login("alice", "pw1").token
    store.read_all()["sessions"][0]["expiresAt"] = 0
    assert svc.resolve_token(token) is None


def test_resolve_actor_prefers_token_and_rejects_bad_ones(store):
    svc = AuthService(store=store)
    user = svc.register("alice", "pw1")
    token = svc.login("alice", "pw1").token

    assert svc.resolve_actor(token, "someone-else") == user.id
    assert svc.resolve_actor(None, "raw-id") == "raw-id"
    with pytest.raises(SessionInvalidError):
        svc.resolve_actor("bogus", user.id)


def test_resolve_actor_requires_token_when_raw_ids_disabled(store):
    settings = dataclasses.replace(core_config.get_settings(), allow_raw_owner_id=False)
    svc = AuthService(store=store, settings=settings)
    with pytest.raises(SessionInvalidError):
        svc.resolve_actor(None, "raw-id")
