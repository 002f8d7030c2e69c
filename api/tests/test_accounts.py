"""
Tests for confirmation token lookup and issuing.
"""

import pytest

from accounts import repository, security, service
from core import db

TOKEN_ROW = {
    "id": 5,
    "confirmation_token": "abc123",
    "user_id": 9,
    "created_at": None,
}


@pytest.fixture
def fake_db(monkeypatch):
    """Records SQL calls and serves canned results."""
    calls = []
    results = {"fetch_one": None, "execute": "DELETE 0"}

    async def _fetch_one(sql, *args):
        calls.append(("fetch_one", args))
        return results["fetch_one"]

    async def _execute(sql, *args):
        calls.append(("execute", args))
        return results["execute"]

    monkeypatch.setattr(db, "fetch_one", _fetch_one)
    monkeypatch.setattr(db, "execute", _execute)
    return calls, results


@pytest.mark.asyncio
async def test_find_token(fake_db):
    calls, results = fake_db
    results["fetch_one"] = dict(TOKEN_ROW)

    token = await service.find_confirmation_token(" abc123 ")

    assert token is not None
    assert token.user_id == 9
    assert calls == [("fetch_one", ("abc123",))]


@pytest.mark.asyncio
async def test_find_token_absent(fake_db):
    assert await service.find_confirmation_token("nope") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["", "   ", None])
async def test_find_blank_token_skips_query(fake_db, raw):
    calls, _ = fake_db
    assert await service.find_confirmation_token(raw) is None
    assert calls == []


@pytest.mark.asyncio
async def test_issue_token(fake_db, monkeypatch):
    calls, results = fake_db
    monkeypatch.setattr(security, "build_confirmation_token", lambda: "fresh-token")
    results["fetch_one"] = {**TOKEN_ROW, "confirmation_token": "fresh-token"}

    token = await service.issue_confirmation_token(9)

    assert token.confirmation_token == "fresh-token"
    assert calls == [("fetch_one", ("fresh-token", 9))]


@pytest.mark.asyncio
async def test_insert_token_without_row_raises(fake_db):
    with pytest.raises(RuntimeError):
        await repository.insert_confirmation_token(user_id=1, confirmation_token="t")


@pytest.mark.asyncio
async def test_delete_token(fake_db):
    _, results = fake_db
    assert await repository.delete_confirmation_token(5) is False
    results["execute"] = "DELETE 1"
    assert await repository.delete_confirmation_token(5) is True


def test_build_token_is_url_safe_and_unique():
    first = security.build_confirmation_token()
    second = security.build_confirmation_token()
    assert first != second
    assert all(c.isalnum() or c in "-_" for c in first)


def test_token_bytes_from_env(monkeypatch):
    monkeypatch.setenv("CONFIRMATION_TOKEN_BYTES", "8")
    assert security.confirmation_token_bytes() == 8
    monkeypatch.setenv("CONFIRMATION_TOKEN_BYTES", "-1")
    assert security.confirmation_token_bytes() == security.DEFAULT_TOKEN_BYTES
    monkeypatch.setenv("CONFIRMATION_TOKEN_BYTES", "lots")
    assert security.confirmation_token_bytes() == security.DEFAULT_TOKEN_BYTES
