"""Pydantic response models for API endpoints."""

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    data_available: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []
    upstream: Any = None


class OkResponse(BaseModel):
    ok: bool = True


class GuideContentResponse(BaseModel):
    id: str
    path: str
    content: str


class GuideHtmlResponse(BaseModel):
    id: str
    title: str
    html: str


class RenderResponse(BaseModel):
    html: str


class StoredFileResponse(BaseModel):
    """Stored download location."""

    ok: bool = True
    fileName: str
    url: str


class BalanceRowResponse(BaseModel):
    name: str
    break_used_minutes: int
    break_limit_minutes: int
    break_left_minutes: int
    lunch_used_minutes: int
    lunch_limit_minutes: int
    lunch_left_minutes: int


class BreakSummaryResponse(BaseModel):
    date: str
    rows: list[BalanceRowResponse]
