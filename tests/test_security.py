# tests/test_security.py

from __future__ import annotations

from task_manager_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_token_round_trip() -> None:
    payload = decode_access_token(create_access_token("alice"))
    assert payload is not None
    assert payload["sub"] == "alice"


def test_expired_token_is_rejected() -> None:
    assert decode_access_token(create_access_token("alice", expires_delta=-60)) is None


def test_tampered_token_is_rejected() -> None:
    header, payload, signature = create_access_token("alice").split(".")
    other_payload = create_access_token("mallory").split(".")[1]
    assert decode_access_token(f"{header}.{other_payload}.{signature}") is None
    assert decode_access_token("not-a-token") is None
    assert decode_access_token("a.b.c") is None


def test_password_hashing() -> None:
    hashed = hash_password("s3cret-pass")
    assert hashed != hash_password("s3cret-pass")
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("wrong", hashed)
