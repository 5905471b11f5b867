"""
Core configuration and error types.
"""
from truthguard.core.config import Settings, settings
from truthguard.core.errors import AnalysisInProgressError, EmptyTextError, SessionNotFoundError

__all__ = [
    'Settings',
    'settings',
    'AnalysisInProgressError',
    'EmptyTextError',
    'SessionNotFoundError'
]
