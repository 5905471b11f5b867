from enum import Enum
import logging

logger = logging.getLogger(__name__)


class PredictionEnum(str, Enum):
    REAL = "Real"
    FAKE = "Fake"

    @classmethod
    def _missing_(cls, value):
        # Accept "real", "FAKE" etc.
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        logger.warning(f"Invalid prediction value: {value}")
        return None


class TopicEnum(str, Enum):
    GOVERNMENT = "government"
    HEALTH = "health"
    TECHNOLOGY = "technology"
    CLIMATE = "climate"
    ECONOMY = "economy"
    SPORTS = "sports"
    DEFAULT = "default"


class HistoryFilterEnum(str, Enum):
    ALL = "all"
    REAL = "real"
    FAKE = "fake"
