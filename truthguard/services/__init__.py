"""
Services package initialization
"""
from truthguard.services.analyzer import FakeNewsAnalyzer, get_analyzer
from truthguard.services.delayed import DelayedAnalysis
from truthguard.services.detection import DetectionService
from truthguard.services.session import AnalysisSession, SessionStore

__all__ = [
    'get_analyzer',
    'FakeNewsAnalyzer',
    'DelayedAnalysis',
    'DetectionService',
    'AnalysisSession',
    'SessionStore'
]
