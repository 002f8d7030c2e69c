"""
Report business logic.

Scope:
- business validation of an incoming report (post and reporter must exist)
- persistence orchestration for intake, listing and removal
- translating storage failures into `ReportStorageError`
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import asyncpg

from . import repository, schemas

logger = logging.getLogger(__name__)

# RuntimeError covers an uninitialized pool / missing DATABASE_URL.
_STORAGE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, RuntimeError)

# reports.id is BIGSERIAL.
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class ReportError(Exception):
    pass


class InvalidPostError(ReportError):
    pass


class InvalidUserError(ReportError):
    pass


class ReportStorageError(ReportError):
    pass


@contextmanager
def _storage(operation: str) -> Iterator[None]:
    try:
        yield
    except _STORAGE_ERRORS as exc:
        logger.exception("report_storage_failed operation=%s", operation)
        raise ReportStorageError(f"{type(exc).__name__}: {exc}") from exc


def _to_response(row: dict) -> schemas.ReportResponse:
    return schemas.ReportResponse(
        id=int(row["id"]),
        username=str(row["username"]),
        post_id=str(row["post_id"]),
        message=str(row["message"]),
        created_at=row.get("created_at"),
    )


async def save_report(post_id: str, payload: schemas.ReportRequest) -> schemas.ReportResponse:
    """
    Validate the references of a field-valid report and persist it.

    Raises InvalidPostError / InvalidUserError for unknown references and
    ReportStorageError when the database cannot be reached or fails.
    """
    post_id = (post_id or "").strip()
    if not post_id:
        raise InvalidPostError("Invalid post id: post id is empty.")

    with _storage("save_report"):
        if not await repository.post_exists(post_id):
            raise InvalidPostError(f"Invalid post id: {post_id}")
        if not await repository.user_exists(payload.username):
            raise InvalidUserError(f"Invalid username: {payload.username}")

        row = await repository.insert_report(
            post_id=post_id,
            username=payload.username,
            message=payload.message,
        )

    if row is None:
        # Post or user was removed between the checks and the insert.
        raise ReportError("Reported post or user no longer exists.")

    logger.info("report_saved id=%s post_id=%s username=%s", row["id"], post_id, payload.username)
    return _to_response(row)


async def find_all() -> list[schemas.ReportResponse]:
    with _storage("find_all"):
        rows = await repository.list_reports()
    return [_to_response(row) for row in rows]


async def delete_report(report_id: int) -> bool:
    """
    Delete a report if it exists. Returns whether a row was removed;
    a missing id is not an error.
    """
    if not BIGINT_MIN <= report_id <= BIGINT_MAX:
        # Outside the id column's range, so no such report can exist.
        logger.info("report_delete_noop id=%s", report_id)
        return False

    with _storage("delete_report"):
        removed = await repository.delete_report(report_id)

    if removed:
        logger.info("report_deleted id=%s", report_id)
    else:
        logger.info("report_delete_noop id=%s", report_id)
    return removed > 0
