from pathlib import Path

from backend.config_helpers import get_log_level
from .logger import setup_logger, to_logging_level

# src/backend/logging/__init__.py → 4つ上がプロジェクトルート
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_LOGS_DIR = _PROJECT_ROOT / "logs"

# LOG_LEVEL設定 (DEBUG_LOG=trueならDEBUG) を全ロガーに適用
_LEVEL = get_log_level()

launcher_logger = setup_logger(
    "backend.launcher", log_file=str(_LOGS_DIR / "launcher.log"), level=_LEVEL
)
notify_logger = setup_logger(
    "backend.notify", log_file=str(_LOGS_DIR / "notify.log"), level=_LEVEL
)
app_logger = setup_logger("frontend", log_file=str(_LOGS_DIR / "app.log"), level=_LEVEL)
api_logger = setup_logger("api", log_file=str(_LOGS_DIR / "api.log"), level=_LEVEL)

__all__ = [
    "setup_logger",
    "to_logging_level",
    "launcher_logger",
    "notify_logger",
    "app_logger",
    "api_logger",
]
