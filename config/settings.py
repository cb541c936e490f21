"""
Configuration Management

Loads application settings from the environment (and a .env file if present).
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"


def _get_int(name, default):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {value!r}, using {default}")
        return default


def _get_log_level(name, default):
    value = os.getenv(name, default).upper()
    if not isinstance(logging.getLevelName(value), int):
        logger.warning(f"Invalid log level for {name}: {value!r}, using {default}")
        return default
    return value


def load_settings():
    """
    Read settings from the environment.

    Returns:
        dict: Setting names mapped to values, ready for app.config
    """
    return {
        'HOST': os.getenv("HOST", "0.0.0.0"),
        'PORT': _get_int("PORT", 3000),
        'USER_STORE': os.getenv("USER_STORE", "json").lower(),
        'USERS_FILE': os.getenv("USERS_FILE", str(DATA_DIR / "users.json")),
        'DATABASE_URL': os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'users.db'}"),
        'PUBLIC_DIR': os.getenv("PUBLIC_DIR", str(PROJECT_ROOT / "public")),
        'BCRYPT_ROUNDS': _get_int("BCRYPT_ROUNDS", 12),
        'LOG_LEVEL': _get_log_level("LOG_LEVEL", "INFO"),
    }
