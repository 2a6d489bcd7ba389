"""Task log endpoints, proxied to the spreadsheet web app."""

from typing import Any

import httpx
from fastapi import APIRouter, Body, Depends

from api.dependencies import get_data_paths, get_http_client
from core.apps_script import create_client
from core.storage import DataPaths
from services import tasks

router = APIRouter(prefix="/api/tasks")


@router.get("/config")
def get_config(paths: DataPaths = Depends(get_data_paths)) -> dict[str, Any]:
    return tasks.load_tasks_config(paths)


@router.get("")
async def list_tasks(
    paths: DataPaths = Depends(get_data_paths),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> Any:
    client = create_client(paths, http)
    return await tasks.list_tasks(client, tasks.load_tasks_config(paths))


@router.post("")
async def add_task(
    row: dict[str, Any] = Body(default_factory=dict),
    paths: DataPaths = Depends(get_data_paths),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> Any:
    """Append a row to the tasks sheet (ФИО and Тема required)."""
    prepared = tasks.prepare_task_row(row)
    client = create_client(paths, http)
    return await tasks.add_task(client, tasks.load_tasks_config(paths), prepared)
