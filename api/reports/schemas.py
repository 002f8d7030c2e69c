"""
Report API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ReportRequest(BaseModel):
    # Strip before length constraints apply.
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(
        ...,
        max_length=64,
        validation_alias=AliasChoices("username", "reporter"),
    )
    message: str = Field(..., max_length=1000)

    @field_validator("username", "message")
    @classmethod
    def not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise ValueError(f"{info.field_name} must not be blank")
        return value


class ReportResponse(BaseModel):
    id: int
    username: str
    post_id: str
    message: str
    created_at: datetime | None = None
