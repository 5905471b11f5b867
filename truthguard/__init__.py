"""
TruthGuard heuristic news detection.
"""
from truthguard.services import analyzer, detection, session

__version__ = "1.0.0"

__all__ = [
    'analyzer',
    'detection',
    'session'
]
