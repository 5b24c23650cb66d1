# Service settings, read from the environment (.env is loaded by the API entry point)
import os
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))

# None means "return every ranked candidate"
DEFAULT_TOP_K = _optional_int("DEFAULT_TOP_K")

# Size of the "up next" list shown beside the player
RELATED_VIDEOS_LIMIT = int(os.getenv("RELATED_VIDEOS_LIMIT", 6))

MAX_CANDIDATES = int(os.getenv("MAX_CANDIDATES", 1000))
