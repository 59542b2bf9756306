import logging
import os
from dotenv import load_dotenv
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://metalab.at/calendar/export/ical/"
DEFAULT_TIMEOUT = 15.0

def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, using %s", name, raw, default)
        return default

class Settings:
    def __init__(self):
        self.url: str = os.getenv("REDALERT_URL", DEFAULT_URL)
        self.timeout: float = _float_env("REDALERT_TIMEOUT", DEFAULT_TIMEOUT)
        self.log_level: str = os.getenv("REDALERT_LOG", "WARNING").upper()

settings = Settings()
