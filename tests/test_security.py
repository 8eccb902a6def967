import base64
import json
from datetime import UTC, datetime, timedelta

import pytest

from backend.app.core.security import (
    constant_time_equals,
    create_admin_session_token,
    verify_admin_session_token,
)

SECRET = "s3cret-admin"
NOW = datetime(2026, 3, 1, 9, 0, tzinfo=UTC)


def _decode_payload(token: str) -> dict:
    payload = token.split(".")[0]
    return json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))


def test_token_has_payload_and_signature_segments():
    session = create_admin_session_token(SECRET, 12, now=NOW)
    payload, signature = session.token.split(".")
    assert payload and signature
    assert "=" not in session.token
    decoded = _decode_payload(session.token)
    assert decoded["role"] == "admin"
    assert decoded["exp"] == int((NOW + timedelta(hours=12)).timestamp() * 1000)
    assert session.expires_at == "2026-03-01T21:00:00.000Z"


def test_token_valid_right_after_creation():
    session = create_admin_session_token(SECRET, 12, now=NOW)
    verification = verify_admin_session_token(session.token, SECRET, now=NOW)
    assert verification.valid
    assert verification.expires_at == session.expires_at


def test_token_valid_with_real_clock():
    session = create_admin_session_token(SECRET)
    assert verify_admin_session_token(session.token, SECRET).valid


def test_token_expires_at_expiry_instant():
    session = create_admin_session_token(SECRET, 2, now=NOW)
    expiry = NOW + timedelta(hours=2)
    assert verify_admin_session_token(session.token, SECRET, now=expiry - timedelta(milliseconds=1)).valid
    assert not verify_admin_session_token(session.token, SECRET, now=expiry).valid
    assert not verify_admin_session_token(session.token, SECRET, now=expiry + timedelta(days=1)).valid


def test_ttl_is_clamped_to_one_hour():
    session = create_admin_session_token(SECRET, 0, now=NOW)
    assert _decode_payload(session.token)["exp"] == int((NOW + timedelta(hours=1)).timestamp() * 1000)


def test_other_secret_rejected():
    session = create_admin_session_token("first-secret", now=NOW)
    verification = verify_admin_session_token(session.token, "second-secret", now=NOW)
    assert not verification.valid
    assert verification.expires_at is None


@pytest.mark.parametrize("index", [0, 5, 12, -1])
def test_tampered_payload_rejected(index):
    session = create_admin_session_token(SECRET, now=NOW)
    payload, signature = session.token.split(".")
    chars = list(payload)
    chars[index] = "A" if chars[index] != "A" else "B"
    tampered = "".join(chars) + "." + signature
    assert not verify_admin_session_token(tampered, SECRET, now=NOW).valid


def test_forged_role_rejected_even_with_valid_signature():
    import hashlib
    import hmac

    exp = int((NOW + timedelta(hours=1)).timestamp() * 1000)
    payload = base64.urlsafe_b64encode(json.dumps({"role": "viewer", "exp": exp}).encode()).rstrip(b"=").decode()
    signature = base64.urlsafe_b64encode(
        hmac.new(SECRET.encode(), payload.encode(), hashlib.sha256).digest()
    ).rstrip(b"=").decode()
    assert not verify_admin_session_token(f"{payload}.{signature}", SECRET, now=NOW).valid


@pytest.mark.parametrize(
    "token",
    ["", None, "no-dot-here", ".", "abc.", ".abc", "a.b.c", "!!!.???"],
)
def test_malformed_tokens_rejected(token):
    assert not verify_admin_session_token(token, SECRET, now=NOW).valid


def test_empty_secret_rejected():
    session = create_admin_session_token(SECRET, now=NOW)
    assert not verify_admin_session_token(session.token, "", now=NOW).valid
    with pytest.raises(ValueError):
        create_admin_session_token("")


def test_constant_time_equals():
    assert constant_time_equals("key", "key")
    assert not constant_time_equals("key", "kez")
    assert not constant_time_equals("", "key")
