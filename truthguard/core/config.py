import os
import logging
from typing import List, Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {value!r}, using {default}")
        return default


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {value!r}, using {default}")
        return default


class Settings:
    """Runtime settings read from the environment (and .env)"""

    def __init__(self):
        self.APP_TITLE = os.getenv("APP_TITLE", "TruthGuard News Detection API")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.PORT = _int_env("PORT", 10000)
        self.ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")

        # Synthetic "analysis" latency before a result is published
        self.ANALYSIS_DELAY_SECONDS = max(0.0, _float_env("ANALYSIS_DELAY_SECONDS", 3.0))
        # Upper bound of the random term added to the suspicion score, 0 disables it
        self.SCORE_JITTER_MAX = max(0.0, _float_env("SCORE_JITTER_MAX", 15.0))
        self.RANDOM_SEED: Optional[int] = _int_env("RANDOM_SEED", -1)
        if self.RANDOM_SEED < 0:
            self.RANDOM_SEED = None

        self.SESSION_TTL_SECONDS = _int_env("SESSION_TTL_SECONDS", 3600)
        self.SESSION_MAX = _int_env("SESSION_MAX", 1000)
        self.HISTORY_LIMIT = _int_env("HISTORY_LIMIT", 50)

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
