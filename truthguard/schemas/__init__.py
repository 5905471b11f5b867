from .detection import (
    ContextualInfo,
    DetailedAnalysis,
    DetectionRequest,
    DetectionResult,
    FakeNewsDebunking,
    LexicalFeatures,
    NewsReport,
    SuspicionScore,
)
from .session import HistoryItem, HistoryResponse, SessionState, Statistics

__all__ = [
    'ContextualInfo',
    'DetailedAnalysis',
    'DetectionRequest',
    'DetectionResult',
    'FakeNewsDebunking',
    'LexicalFeatures',
    'NewsReport',
    'SuspicionScore',
    'HistoryItem',
    'HistoryResponse',
    'SessionState',
    'Statistics'
]
