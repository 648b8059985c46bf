# config.py
# Role: Application settings for the Kakeibo finance tracker.
#       Reads environment variables (optionally from a .env file) once at import.

"""
Configuration for the finance tracker.

All values can be overridden with environment variables or a local .env file:
- FINANCE_DATABASE_URL   SQLAlchemy URL (default: SQLite file under ./database)
- FINANCE_SECRET_KEY     key used to sign the session cookie
- FINANCE_CURRENCY_PREFIX
- FINANCE_LOG_LEVEL
- FINANCE_TREND_MONTHS
"""

import os
import secrets

from dotenv import load_dotenv

load_dotenv()

# Base directory of the project (where this module lives)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

APP_NAME = "Personal Finance Tracker"

# Folder for the default SQLite database
DB_DIR = os.path.join(BASE_DIR, "database")
DEFAULT_DATABASE_URL = f"sqlite:///{os.path.join(DB_DIR, 'finance.db')}"

DATABASE_URL = os.getenv("FINANCE_DATABASE_URL", DEFAULT_DATABASE_URL)

# Without an explicit key, sessions (and CSRF tokens) only survive one process.
SECRET_KEY = os.getenv("FINANCE_SECRET_KEY") or secrets.token_hex(32)

CURRENCY_PREFIX = os.getenv("FINANCE_CURRENCY_PREFIX", "Rp ")

LOG_LEVEL = os.getenv("FINANCE_LOG_LEVEL", "INFO").upper()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


TREND_MONTHS = _env_int("FINANCE_TREND_MONTHS", 6)

# Kakeibo category -> chart/badge color.
# Passed explicitly to the pie renderer; templates read it for badges.
CATEGORY_COLORS = {
    "Needs": "#3498db",
    "Wants": "#2ecc71",
    "Culture": "#9b59b6",
    "Unexpected": "#e74c3c",
}

FALLBACK_COLOR = "#999"
