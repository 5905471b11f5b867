from pydantic import Field
from datetime import datetime
from typing import List, Optional
from truthguard.models import PredictionEnum
from truthguard.schemas.detection import CamelModel, DetectionResult


class HistoryItem(CamelModel):
    id: str
    statement: str
    result: PredictionEnum
    confidence: int
    explanation: str
    timestamp: datetime


class Statistics(CamelModel):
    total_checks: int = 0
    real_news: int = 0
    fake_news: int = 0
    average_confidence: int = 0


class SessionState(CamelModel):
    session_id: str
    busy: bool
    input_text: str = ""
    result: Optional[DetectionResult] = None


class HistoryResponse(CamelModel):
    session_id: str
    filter: str
    items: List[HistoryItem] = Field(default_factory=list)
