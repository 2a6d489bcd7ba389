"""
Pytest configuration and shared fixtures.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from fastapi.testclient import TestClient

import core.apps_script
from api.dependencies import get_data_paths, get_http_client
from api.main import app
from core.storage import DataPaths, read_json, write_json_atomic
from scripts.init_data import init_data

APPS_SCRIPT_URL = "https://script.example.com/macros/s/abc/exec"


class FakeUpstream:
    """Stands in for the spreadsheet web app behind httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: dict[str, tuple[int, dict]] = {}

    def respond(self, action: str, status_code: int = 200, **kwargs):
        """Register a reply for `action`; kwargs go to httpx.Response."""
        self._responses[action] = (status_code, kwargs)

    def fail(self, exc: Exception):
        self._responses["*raise*"] = (0, {"exc": exc})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if "*raise*" in self._responses:
            raise self._responses["*raise*"][1]["exc"]
        if request.method == "GET":
            action = request.url.params.get("action")
        else:
            action = json.loads(request.content)["action"]
        status_code, kwargs = self._responses.get(action, (200, {"json": {"ok": True}}))
        return httpx.Response(status_code, **kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def portal_root(tmp_path) -> Path:
    """Seeded portal root with the integration and sheets configured."""
    root = tmp_path / "portal"
    init_data(root, None)
    paths = DataPaths.from_root(root)

    write_json_atomic(paths.integrations_json, {"appsScriptUrl": APPS_SCRIPT_URL})

    tasks_cfg = read_json(paths.tasks_config_json)
    tasks_cfg["spreadsheetId"] = "tasks-sheet"
    write_json_atomic(paths.tasks_config_json, tasks_cfg)

    break_cfg = read_json(paths.break_config_json)
    break_cfg["spreadsheetId"] = "break-sheet"
    break_cfg["defaults"] = {"breakMinutes": 30, "lunchMinutes": 60}
    write_json_atomic(paths.break_config_json, break_cfg)
    return root


@pytest.fixture
def data_paths(portal_root) -> DataPaths:
    return DataPaths.from_root(portal_root)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(data_paths, upstream, tmp_path, monkeypatch):
    """TestClient over a temporary portal root and the fake upstream."""
    monkeypatch.setattr(core.apps_script, "APPS_SCRIPT_URL", "")

    async def http_override():
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(upstream.handler), follow_redirects=True
        ) as http:
            yield http

    app.dependency_overrides[get_data_paths] = lambda: data_paths
    app.dependency_overrides[get_http_client] = http_override
    previous_log_db = app.state.request_log_db
    app.state.request_log_db = tmp_path / "db" / "requests.db"
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        app.state.request_log_db = previous_log_db


@pytest.fixture
def sample_day():
    """A break.getDay response: two employees, mixed events, one stranger."""
    return {
        "employees": [
            {"name": "Смирнова Анна", "breakMinutes": 30, "lunchMinutes": 60},
            {"name": "Иванов Пётр", "breakMinutes": "20", "lunchMinutes": 45},
        ],
        "events": [
            {"id": "e1", "ФИО": "Иванов Пётр", "Тип": "Перерыв", "Состояние": "Завершен",
             "Начало": "10:00", "Конец": "10:15"},
            {"id": "e2", "ФИО": "Иванов Пётр", "Тип": "Обед", "Состояние": "Завершен",
             "Начало": "13:00", "Конец": "14:00"},
            {"id": "e3", "ФИО": "Смирнова Анна ", "Тип": "Перерыв", "Состояние": "Завершен",
             "Начало": "11:00", "Конец": "11:10"},
            {"id": "e4", "ФИО": "Смирнова Анна", "Тип": "Обед", "Состояние": "Начат",
             "Начало": "12:00", "Конец": ""},
            {"id": "e5", "ФИО": "Посторонний", "Тип": "Перерыв", "Состояние": "Завершен",
             "Начало": "09:00", "Конец": "09:30"},
        ],
    }
