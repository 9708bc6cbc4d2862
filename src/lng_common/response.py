"""Unified API response wrapper.

All API endpoints return this format:
{
    "code": 0,           // 0=success, non-0=error code
    "message": "success",
    "data": { ... },     // null on error, or {"errors": [...]} for rejections
    "timestamp": "...",
    "request_id": "..."
}
"""

import dataclasses
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")


def success_response(data: Any = None) -> ApiResponse:
    return ApiResponse(code=0, message="success", data=data)


def error_response(code: int, message: str, errors: list[str] | None = None) -> ApiResponse:
    data = {"errors": errors} if errors else None
    return ApiResponse(code=code, message=message, data=data)


def respond(request: Request, data: Any = None) -> ApiResponse:
    """Success envelope carrying the request id set by RequestLogMiddleware."""
    resp = success_response(data)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


def record_payload(record: Any) -> dict[str, Any]:
    """Plain dict of a frozen domain record (nested records and tuples included)."""
    return dataclasses.asdict(record)


def records_payload(records: Iterable[Any]) -> list[dict[str, Any]]:
    return [dataclasses.asdict(record) for record in records]
