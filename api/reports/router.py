"""
Newsfeed report API endpoints.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Response, status
from pydantic import ValidationError

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


def _field_messages(exc: ValidationError) -> list[str]:
    """
    One human-readable message per violated field.
    """
    messages: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "body"
        if error["type"] == "missing":
            messages.append(f"{field} is required")
        elif error["type"] == "value_error":
            messages.append(str(error["ctx"]["error"]))
        else:
            messages.append(f"{field}: {error['msg']}")
    return messages


@router.post("/post/newsfeed/report/{post_id}")
async def save_report(post_id: str, payload: Any = Body(default=None)) -> Response:
    """
    Report a post. The reporter must be a known user and the post must exist.
    """
    try:
        report = schemas.ReportRequest.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_406_NOT_ACCEPTABLE,
            detail=_field_messages(exc),
        ) from exc

    try:
        await service.save_report(post_id, report)
    except service.ReportStorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    except service.ReportError as exc:
        raise HTTPException(
            status_code=status.HTTP_406_NOT_ACCEPTABLE,
            detail=str(exc),
        ) from exc
    return Response(status_code=status.HTTP_200_OK)


@router.get("/post/newsfeed/report", response_model=list[schemas.ReportResponse])
async def find_all() -> list[schemas.ReportResponse]:
    try:
        return await service.find_all()
    except service.ReportError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    except Exception as exc:
        logger.exception("report_list_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{type(exc).__name__}: {exc}",
        ) from exc


@router.delete("/post/newsfeed/report/{report_id}")
async def delete_report(report_id: int) -> Response:
    """
    Delete a report. Deleting an unknown id succeeds without doing anything.
    """
    try:
        await service.delete_report(report_id)
    except service.ReportError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    return Response(status_code=status.HTTP_200_OK)
