"""Break/lunch scheduler endpoints."""

from dataclasses import asdict
from typing import Any

import httpx
from fastapi import APIRouter, Depends

from api.dependencies import get_data_paths, get_http_client
from api.models import BreakConfigRequest, BreakEventRequest, BreakSummaryResponse
from core.apps_script import create_client
from core.storage import DataPaths
from services import breaks

router = APIRouter(prefix="/api/break")


@router.get("/config")
def get_config(paths: DataPaths = Depends(get_data_paths)) -> dict[str, Any]:
    return breaks.load_break_config(paths)


@router.get("")
async def get_day(
    date: str | None = None,
    paths: DataPaths = Depends(get_data_paths),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> Any:
    """Employees and events of one day sheet."""
    cfg = breaks.load_break_config(paths)
    day = breaks.validate_day(date, cfg["maxHistoryDays"])
    client = create_client(paths, http)
    return await breaks.get_day(client, cfg, day)


@router.get("/summary", response_model=BreakSummaryResponse)
async def get_summary(
    date: str | None = None,
    paths: DataPaths = Depends(get_data_paths),
    http: httpx.AsyncClient = Depends(get_http_client),
):
    """Remaining break and lunch minutes per employee for one day."""
    cfg = breaks.load_break_config(paths)
    day = breaks.validate_day(date, cfg["maxHistoryDays"])
    client = create_client(paths, http)
    rows = await breaks.summarize_day(client, cfg, day)
    return BreakSummaryResponse(date=day.isoformat(), rows=[asdict(row) for row in rows])


@router.post("/event")
async def upsert_event(
    body: BreakEventRequest,
    paths: DataPaths = Depends(get_data_paths),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> Any:
    cfg = breaks.load_break_config(paths)
    client = create_client(paths, http)
    return await breaks.upsert_event(client, cfg, body.model_dump())


@router.post("/config")
async def save_config(
    body: BreakConfigRequest,
    paths: DataPaths = Depends(get_data_paths),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> Any:
    cfg = breaks.load_break_config(paths)
    client = create_client(paths, http)
    return await breaks.save_employees(client, cfg, body.employees)
