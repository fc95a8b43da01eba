"""Environment configuration for postplanner.

Values come from the process environment, optionally seeded from a .env file.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _int_setting(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError as e:
        raise RuntimeError(f"Invalid {name}; must be an integer.") from e
    if value <= 0:
        raise RuntimeError(f"{name} must be > 0.")
    return value


# Time zone used for "now" when a request does not name one
SCHEDULE_TIMEZONE = os.getenv("SCHEDULE_TIMEZONE", "UTC")

# Parse endpoint rate limit: RATE_LIMIT_POINTS requests per RATE_LIMIT_WINDOW_SEC per client
RATE_LIMIT_POINTS = _int_setting("RATE_LIMIT_POINTS", "100")
RATE_LIMIT_WINDOW_SEC = _int_setting("RATE_LIMIT_WINDOW_SEC", "900")

DEBUG = os.getenv("DEBUG", "False").lower() == "true"
