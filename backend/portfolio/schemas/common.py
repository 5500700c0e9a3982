"""
Portfolio Backend — Shared Response Envelopes
===============================================

Every JSON body carries a `success` flag except the delete result, the root
status message and the health report, which keep the shapes existing
clients already read.
"""

from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer

DataT = TypeVar("DataT")


class MessageResponse(BaseModel):
    """Returned by register, create and update."""
    success: bool = Field(default=True)
    message: str = Field(description="Human-readable outcome")


class DataResponse(BaseModel, Generic[DataT]):
    """
    Wraps a payload as `{"success": true, "data": ...}`.

    Parametrized per endpoint, e.g. DataResponse[SkillRecord] for get-by-id
    and DataResponse[List[SkillRecord]] for list.
    """
    success: bool = Field(default=True)
    data: DataT


class DeleteResponse(BaseModel):
    """
    The store's report for a delete, passed through unchanged.

    `deletedCount` is 0 when no document matched the id; that is not an error.
    """
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    deleted_count: int = Field(alias="deletedCount")


class ErrorResponse(BaseModel):
    """
    Body of every error response produced by the global exception handlers.

    Example:
        {
            "success": false,
            "error": "not_found",
            "message": "skill not found",
            "request_id": "1f2e3d4c"
        }
    """
    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class StatusResponse(BaseModel):
    """
    Root liveness message.

    `timestamp` is rendered in UTC with millisecond precision and a `Z`
    suffix, e.g. "2026-01-15T12:00:00.123Z".
    """
    message: str
    timestamp: datetime

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class HealthResponse(BaseModel):
    status: str = Field(description="healthy or unhealthy")
    version: str
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float
