"""
Break/lunch scheduler: day sheets, employee limits and remaining balances.

Rows arrive from the spreadsheet with Russian column headers and labels.
They are converted to the core types at this boundary.
"""

import copy
import logging
from datetime import date, datetime, timedelta
from typing import Any

from core.apps_script import AppsScriptClient
from core.breaks import compute_remaining
from core.config import (
    BREAK_CONFIG_DEFAULTS,
    BREAK_EMPLOYEE_COLUMN,
    BREAK_END_COLUMN,
    BREAK_KIND_COLUMN,
    BREAK_KIND_LABELS,
    BREAK_START_COLUMN,
    BREAK_STATE_COLUMN,
    BREAK_STATE_LABELS,
)
from core.errors import InvalidRequestError
from core.storage import DataPaths, read_json
from models.breaks import FINISHED, STARTED, BalanceRow, BreakEvent, EmployeeLimit

logger = logging.getLogger(__name__)

# Canonical value -> sheet label, for writing rows back
_STATE_SHEET_LABELS = {value: label for label, value in BREAK_STATE_LABELS.items()}

EVENT_ACTIONS = ("start", "finish")


# =============================================================================
# CONFIG AND DATES
# =============================================================================


def load_break_config(paths: DataPaths) -> dict[str, Any]:
    """
    Read data/break.config.json over the built-in defaults.

    Stored values that are null or of the wrong type fall back to the defaults.
    """
    cfg = copy.deepcopy(BREAK_CONFIG_DEFAULTS)
    if not paths.break_config_json.exists():
        return cfg

    stored = read_json(paths.break_config_json)
    if not isinstance(stored, dict):
        logger.warning("Ignoring %s: not a JSON object", paths.break_config_json)
        return cfg

    for key, value in stored.items():
        if key == "defaults":
            continue
        default = BREAK_CONFIG_DEFAULTS.get(key)
        if value is None and key in BREAK_CONFIG_DEFAULTS:
            continue
        if isinstance(default, int) and not _is_int(value):
            logger.warning("Ignoring break config %s=%r", key, value)
            continue
        cfg[key] = value

    stored_defaults = stored.get("defaults")
    if isinstance(stored_defaults, dict):
        for key, value in stored_defaults.items():
            if value is not None:
                cfg["defaults"][key] = value
    elif stored_defaults is not None:
        logger.warning("Ignoring break config defaults=%r", stored_defaults)
    return cfg


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_day(value: str | None, max_history_days: int, today: date | None = None) -> date:
    """
    Parse a YYYY-MM-DD day inside the allowed history window.

    Raises:
        InvalidRequestError: missing, malformed, in the future or too old
    """
    if not value:
        raise InvalidRequestError("date is required (YYYY-MM-DD)")
    try:
        day = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidRequestError(
            "Invalid date format", details=["Expected format: YYYY-MM-DD"]
        )

    today = today or date.today()
    earliest = today - timedelta(days=int(max_history_days))
    if day > today:
        raise InvalidRequestError("date is in the future", details=[value])
    if day < earliest:
        raise InvalidRequestError(
            f"date is older than {max_history_days} days",
            details=[f"Earliest allowed: {earliest.isoformat()}"],
        )
    return day


# =============================================================================
# SHEET ROW CONVERSION
# =============================================================================


def to_minutes(value: Any) -> int:
    """Coerce a sheet cell to non-negative whole minutes (bad values are 0)."""
    try:
        minutes = int(float(value))
    except (TypeError, ValueError):
        return 0
    return max(0, minutes)


def employee_limits_from_rows(rows: list[dict[str, Any]]) -> list[EmployeeLimit]:
    limits = []
    for row in rows or []:
        name = str(row.get("name") or "").strip()
        if not name:
            continue
        limits.append(
            EmployeeLimit(
                name=name,
                break_limit_minutes=to_minutes(row.get("breakMinutes")),
                lunch_limit_minutes=to_minutes(row.get("lunchMinutes")),
            )
        )
    return limits


def event_from_row(row: dict[str, Any]) -> BreakEvent:
    """Convert one sheet row; unknown labels pass through unchanged."""
    kind = str(row.get(BREAK_KIND_COLUMN) or "").strip()
    state = str(row.get(BREAK_STATE_COLUMN) or "").strip()
    return BreakEvent(
        employee_name=str(row.get(BREAK_EMPLOYEE_COLUMN) or "").strip(),
        kind=BREAK_KIND_LABELS.get(kind, kind),
        state=BREAK_STATE_LABELS.get(state, state),
        start_time=str(row.get(BREAK_START_COLUMN) or ""),
        end_time=str(row.get(BREAK_END_COLUMN) or ""),
    )


def normalize_employees(rows: list[dict[str, Any]], defaults: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Clean employee limit rows before saving.

    Names are trimmed and blank names dropped. Empty or zero limits fall back
    to the configured defaults.
    """
    normalized = []
    for row in rows or []:
        name = str(row.get("name") or "").strip()
        if not name:
            continue
        normalized.append(
            {
                "name": name,
                "breakMinutes": to_minutes(
                    row.get("breakMinutes") or defaults.get("breakMinutes") or 0
                ),
                "lunchMinutes": to_minutes(
                    row.get("lunchMinutes") or defaults.get("lunchMinutes") or 0
                ),
            }
        )
    return normalized


def apply_event_action(row: dict[str, Any], action: str, now_hm: str) -> dict[str, Any]:
    """
    Return a copy of `row` moved to the state `action` implies.

    start: state started, start time filled if empty.
    finish: state finished, start and end times filled if empty.
    """
    if action not in EVENT_ACTIONS:
        raise InvalidRequestError(
            f"Unknown action '{action}'", details=[f"Expected one of: {', '.join(EVENT_ACTIONS)}"]
        )

    updated = dict(row)
    if not updated.get(BREAK_START_COLUMN):
        updated[BREAK_START_COLUMN] = now_hm
    if action == "start":
        updated[BREAK_STATE_COLUMN] = _STATE_SHEET_LABELS[STARTED]
    else:
        updated[BREAK_STATE_COLUMN] = _STATE_SHEET_LABELS[FINISHED]
        if not updated.get(BREAK_END_COLUMN):
            updated[BREAK_END_COLUMN] = now_hm
    return updated


# =============================================================================
# UPSTREAM CALLS
# =============================================================================


async def get_day(client: AppsScriptClient, cfg: dict[str, Any], day: date) -> Any:
    return await client.get(
        "break.getDay",
        spreadsheetId=cfg.get("spreadsheetId"),
        date=day.isoformat(),
        dailySheetPrefix=cfg.get("dailySheetPrefix"),
        configSheetName=cfg.get("configSheetName"),
    )


async def upsert_event(
    client: AppsScriptClient,
    cfg: dict[str, Any],
    payload: dict[str, Any],
    now: datetime | None = None,
) -> Any:
    """Save an event row; an `action` in the payload is applied first."""
    payload = dict(payload)
    action = payload.pop("action", None)
    if action:
        now_hm = (now or datetime.now()).strftime("%H:%M")
        payload["event"] = apply_event_action(payload.get("event") or {}, action, now_hm)

    return await client.post(
        "break.upsertEvent",
        spreadsheetId=cfg.get("spreadsheetId"),
        dailySheetPrefix=cfg.get("dailySheetPrefix"),
        configSheetName=cfg.get("configSheetName"),
        payload=payload,
    )


async def save_employees(
    client: AppsScriptClient, cfg: dict[str, Any], employees: list[dict[str, Any]]
) -> Any:
    return await client.post(
        "break.saveConfig",
        spreadsheetId=cfg.get("spreadsheetId"),
        configSheetName=cfg.get("configSheetName"),
        defaults=cfg.get("defaults"),
        employees=normalize_employees(employees, cfg.get("defaults") or {}),
    )


def summarize(day_data: Any) -> list[BalanceRow]:
    """Remaining balances from a break.getDay response."""
    day_data = day_data if isinstance(day_data, dict) else {}
    employees = day_data.get("employees") if isinstance(day_data.get("employees"), list) else []
    events = day_data.get("events") if isinstance(day_data.get("events"), list) else []
    return compute_remaining(
        employee_limits_from_rows([row for row in employees if isinstance(row, dict)]),
        [event_from_row(row) for row in events if isinstance(row, dict)],
    )


async def summarize_day(client: AppsScriptClient, cfg: dict[str, Any], day: date) -> list[BalanceRow]:
    return summarize(await get_day(client, cfg, day))
