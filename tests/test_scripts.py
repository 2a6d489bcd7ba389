"""Tests for the command-line helpers."""

import sqlite3

from core.storage import DataPaths, read_json, write_json_atomic
from models.breaks import BalanceRow
from scripts.break_summary import format_rows
from scripts.init_data import init_data


def test_init_data_seeds_once(tmp_path):
    root = tmp_path / "portal"
    db_path = tmp_path / "db" / "requests.db"
    created = init_data(root, db_path)

    paths = DataPaths.from_root(root)
    assert paths.guides_json in created
    assert read_json(paths.break_config_json)["maxHistoryDays"] == 183
    assert read_json(paths.tasks_config_json)["sheetName"] == "Tasks"
    conn = sqlite3.connect(db_path)
    try:
        assert conn.execute("SELECT COUNT(*) FROM api_requests").fetchone() == (0,)
    finally:
        conn.close()

    write_json_atomic(paths.guides_json, {"guides": [{"id": "x"}]})
    assert init_data(root, None) == []
    assert read_json(paths.guides_json)["guides"] == [{"id": "x"}]


def test_format_rows():
    row = BalanceRow("Анна", 10, 30, 20, 0, 60, 60)
    assert format_rows([row]) == ["Анна: break 20/30 min, lunch 60/60 min"]
    assert format_rows([]) == ["No employees configured."]
