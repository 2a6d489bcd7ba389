"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
PORTAL_ROOT = Path(os.environ.get("PORTAL_ROOT", str(PROJECT_ROOT)))
STATIC_DIR = Path(os.environ.get("STATIC_DIR", str(PORTAL_ROOT / "public")))

# Empty string disables request logging
_request_log_db = os.environ.get(
    "REQUEST_LOG_DB", str(PORTAL_ROOT / "data" / "db" / "portal-requests.db")
)
REQUEST_LOG_DB = Path(_request_log_db) if _request_log_db else None

# =============================================================================
# SPREADSHEET INTEGRATION
# =============================================================================

# Overrides data/integrations.json -> appsScriptUrl when set
APPS_SCRIPT_URL = os.environ.get("APPS_SCRIPT_URL", "").strip()
UPSTREAM_TIMEOUT_SECONDS = float(os.environ.get("UPSTREAM_TIMEOUT_SECONDS", "15"))

# =============================================================================
# TASK LOG SHEET
# =============================================================================

TASK_DATE_COLUMN = "Дата"
TASK_REQUIRED_COLUMNS = ("ФИО", "Тема")

# =============================================================================
# BREAK SCHEDULER SHEET
# =============================================================================

BREAK_EMPLOYEE_COLUMN = "ФИО"
BREAK_KIND_COLUMN = "Тип"
BREAK_STATE_COLUMN = "Состояние"
BREAK_START_COLUMN = "Начало"
BREAK_END_COLUMN = "Конец"

# Sheet label -> canonical value
BREAK_KIND_LABELS = {"Перерыв": "break", "Обед": "lunch"}
BREAK_STATE_LABELS = {
    "Запланирован": "planned",
    "Начат": "started",
    "Завершен": "finished",
}

BREAK_CONFIG_DEFAULTS = {
    "maxHistoryDays": 183,
    "pollMs": 5000,
    "defaults": {"breakMinutes": 0, "lunchMinutes": 0},
}

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
MAX_UPLOAD_SIZE_MB = int(os.environ.get("MAX_UPLOAD_SIZE_MB", "512"))
MAX_UPLOAD_SIZE_BYTES = MAX_UPLOAD_SIZE_MB * 1024 * 1024
API_VERSION = "1.0.0"
