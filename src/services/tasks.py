"""
Task log: proxies the tasks sheet through the spreadsheet web app.
"""

from datetime import datetime
from typing import Any

from core.apps_script import AppsScriptClient
from core.config import TASK_DATE_COLUMN, TASK_REQUIRED_COLUMNS
from core.errors import InvalidRequestError
from core.storage import DataPaths, read_json


def load_tasks_config(paths: DataPaths) -> dict[str, Any]:
    return read_json(paths.tasks_config_json)


def prepare_task_row(row: dict[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """
    Trim string values, check required columns and stamp the date column.

    Raises:
        InvalidRequestError: a required column is blank
    """
    prepared = {k: v.strip() if isinstance(v, str) else v for k, v in row.items()}
    missing = [col for col in TASK_REQUIRED_COLUMNS if not prepared.get(col)]
    if missing:
        raise InvalidRequestError(
            f"{' and '.join(TASK_REQUIRED_COLUMNS)} are required",
            details=[f"Missing: {col}" for col in missing],
        )
    if not prepared.get(TASK_DATE_COLUMN):
        prepared[TASK_DATE_COLUMN] = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    return prepared


async def list_tasks(client: AppsScriptClient, cfg: dict[str, Any]) -> Any:
    return await client.get(
        "tasks.list",
        spreadsheetId=cfg.get("spreadsheetId"),
        sheetName=cfg.get("sheetName"),
    )


async def add_task(client: AppsScriptClient, cfg: dict[str, Any], row: dict[str, Any]) -> Any:
    return await client.post(
        "tasks.add",
        spreadsheetId=cfg.get("spreadsheetId"),
        sheetName=cfg.get("sheetName"),
        row=row,
    )
