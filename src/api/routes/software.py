"""Software catalog endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies import get_data_paths
from api.models import OkResponse, SoftwareCatalogRequest
from core.storage import DataPaths
from services import software

router = APIRouter(prefix="/api")


@router.get("/software")
def get_catalog(
    q: str | None = None,
    tags: str | None = None,
    paths: DataPaths = Depends(get_data_paths),
) -> dict[str, Any]:
    """Catalog, optionally filtered by query and comma-separated tags."""
    tag_list = [t.strip() for t in tags.split(",") if t.strip()] if tags else []
    return software.load_catalog(paths, q, tag_list)


@router.put("/software", response_model=OkResponse)
def put_catalog(body: SoftwareCatalogRequest, paths: DataPaths = Depends(get_data_paths)):
    software.save_catalog(paths, body.model_dump())
    return OkResponse()
