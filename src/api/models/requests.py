"""Pydantic request bodies for API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class GuideCreateRequest(BaseModel):
    # id/title are checked by the service so a missing value is a 400
    id: str = ""
    title: str = ""
    category: str = ""
    tags: list[str] | None = None
    keywords: list[str] | None = None
    summary: str = ""
    contentMarkdown: str = ""


class GuideUpdateRequest(BaseModel):
    title: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    keywords: list[str] | None = None
    summary: str | None = None
    contentMarkdown: str | None = None


class RenderRequest(BaseModel):
    markdown: str = ""


class SoftwareCatalogRequest(BaseModel):
    """Catalog body; extra top-level fields are stored as given."""

    model_config = ConfigDict(extra="allow")

    version: int = 1
    items: list[dict[str, Any]] | None = None


class FileRenameRequest(BaseModel):
    fileName: str = ""
    newFileName: str = ""


class BreakEventRequest(BaseModel):
    """Event upsert: `event` is a sheet row, `action` is start/finish."""

    model_config = ConfigDict(extra="allow")

    date: str = ""
    event: dict[str, Any] = {}
    action: str | None = None


class BreakConfigRequest(BaseModel):
    employees: list[dict[str, Any]] = []
