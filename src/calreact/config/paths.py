from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir, user_log_dir

APP_NAME = "CalReact"
APP_AUTHOR = "CalReact"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))
LOG_DIR = Path(user_log_dir(APP_NAME, APP_AUTHOR))
EVENTS_FILE = DATA_DIR / "events.json"
