"""API Pydantic models."""

from core.errors import ErrorCodes

from .requests import (
    BreakConfigRequest,
    BreakEventRequest,
    FileRenameRequest,
    GuideCreateRequest,
    GuideUpdateRequest,
    RenderRequest,
    SoftwareCatalogRequest,
)
from .responses import (
    BalanceRowResponse,
    BreakSummaryResponse,
    ErrorResponse,
    GuideContentResponse,
    GuideHtmlResponse,
    HealthResponse,
    OkResponse,
    RenderResponse,
    StoredFileResponse,
)

__all__ = [
    "BalanceRowResponse",
    "BreakConfigRequest",
    "BreakEventRequest",
    "BreakSummaryResponse",
    "ErrorCodes",
    "ErrorResponse",
    "FileRenameRequest",
    "GuideContentResponse",
    "GuideCreateRequest",
    "GuideHtmlResponse",
    "GuideUpdateRequest",
    "HealthResponse",
    "OkResponse",
    "RenderRequest",
    "RenderResponse",
    "SoftwareCatalogRequest",
    "StoredFileResponse",
]
