"""
Shared fixtures: an in-memory stand-in for the report tables.
"""

from datetime import datetime, timezone

import pytest

from reports import repository


class FakeReportStore:
    """Mimics reports.repository over plain Python collections."""

    def __init__(self):
        self.posts = set()
        self.users = set()
        self.reports = []
        self._next_id = 1

    async def post_exists(self, post_id):
        return post_id in self.posts

    async def user_exists(self, username):
        return username in self.users

    async def insert_report(self, *, post_id, username, message):
        if post_id not in self.posts or username not in self.users:
            return None
        row = {
            "id": self._next_id,
            "username": username,
            "post_id": post_id,
            "message": message,
            "created_at": datetime.now(timezone.utc),
        }
        self._next_id += 1
        self.reports.append(row)
        return dict(row)

    async def list_reports(self):
        return [dict(r) for r in sorted(self.reports, key=lambda r: r["id"])]

    async def delete_report(self, report_id):
        before = len(self.reports)
        self.reports = [r for r in self.reports if r["id"] != report_id]
        return before - len(self.reports)


@pytest.fixture
def store(monkeypatch):
    fake = FakeReportStore()
    for name in ("post_exists", "user_exists", "insert_report", "list_reports", "delete_report"):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def seeded_store(store):
    """Store with post 42 and users alice/bob."""
    store.posts.add("42")
    store.users.update({"alice", "bob"})
    return store
