"""Guides wiki endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies import get_data_paths
from api.models import (
    GuideContentResponse,
    GuideCreateRequest,
    GuideHtmlResponse,
    GuideUpdateRequest,
    OkResponse,
    RenderRequest,
    RenderResponse,
)
from core.markdown import render_markdown
from core.storage import DataPaths
from services import guides

router = APIRouter(prefix="/api")


@router.get("/guides")
def list_guides(q: str | None = None, paths: DataPaths = Depends(get_data_paths)) -> dict[str, Any]:
    """Guides manifest, optionally filtered by a free-text query."""
    return guides.list_guides(paths, q)


@router.post("/guides", response_model=OkResponse)
def create_guide(body: GuideCreateRequest, paths: DataPaths = Depends(get_data_paths)):
    guides.create_guide(
        paths,
        guide_id=body.id,
        title=body.title,
        category=body.category,
        tags=body.tags,
        keywords=body.keywords,
        summary=body.summary,
        content_markdown=body.contentMarkdown,
    )
    return OkResponse()


@router.put("/guides/{guide_id}", response_model=OkResponse)
def update_guide(
    guide_id: str, body: GuideUpdateRequest, paths: DataPaths = Depends(get_data_paths)
):
    guides.update_guide(
        paths,
        guide_id,
        title=body.title,
        category=body.category,
        tags=body.tags,
        keywords=body.keywords,
        summary=body.summary,
        content_markdown=body.contentMarkdown,
    )
    return OkResponse()


@router.delete("/guides/{guide_id}", response_model=OkResponse)
def delete_guide(guide_id: str, paths: DataPaths = Depends(get_data_paths)):
    guides.delete_guide(paths, guide_id)
    return OkResponse()


@router.get("/guides/{guide_id}/content", response_model=GuideContentResponse)
def guide_content(guide_id: str, paths: DataPaths = Depends(get_data_paths)):
    return guides.read_guide_content(paths, guide_id)


@router.get("/guides/{guide_id}/html", response_model=GuideHtmlResponse)
def guide_html(guide_id: str, paths: DataPaths = Depends(get_data_paths)):
    return guides.render_guide(paths, guide_id)


@router.post("/markdown/render", response_model=RenderResponse)
def render_preview(body: RenderRequest):
    """Editor preview: render Markdown without saving it."""
    return RenderResponse(html=render_markdown(body.markdown))
