"""Environment-driven settings for flowcast."""

import os
from pathlib import Path

from flowcast.logger import get_logger

logger = get_logger(__name__)

DATA_PATH_ENV = "FLOWCAST_DATA_PATH"
HORIZON_DAYS_ENV = "FLOWCAST_HORIZON_DAYS"

DEFAULT_HORIZON_DAYS = 30
DEFAULT_UPCOMING_DAYS = 7


def get_env_int(name: str, default: int, min_value: int | None = None) -> int:
    """Read an integer setting, falling back to ``default`` on bad input."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("[ENV] Invalid %s='%s', using default %s.", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning(
            "[ENV] %s='%s' below minimum %s, using default %s.",
            name,
            raw,
            min_value,
            default,
        )
        return default
    return value


def default_data_path() -> Path:
    """Snapshot path used when neither --data-path nor FLOWCAST_DATA_PATH is set."""
    return Path.home() / ".flowcast" / "snapshot.json"


def horizon_days() -> int:
    return get_env_int(HORIZON_DAYS_ENV, DEFAULT_HORIZON_DAYS, min_value=1)
