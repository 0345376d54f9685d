from __future__ import annotations

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "Kiosk Calendar"
APP_AUTHOR = "KioskCalendar"
LOG_DIR = Path(user_log_dir(APP_NAME, APP_AUTHOR))
LOG_FILE_NAME = "kiosk_calendar.log"
