import uuid
import logging
from collections import deque
from datetime import datetime, timezone
from typing import Deque, List, Optional
import numpy as np
from cachetools import TTLCache

from truthguard.core.errors import AnalysisInProgressError, SessionNotFoundError
from truthguard.models import HistoryFilterEnum, PredictionEnum
from truthguard.schemas.detection import DetectionResult
from truthguard.schemas.session import HistoryItem, SessionState, Statistics
from truthguard.services.analyzer import round_half_up
from truthguard.services.delayed import DelayedAnalysis
from truthguard.services.detection import DetectionService, validate_text

logger = logging.getLogger(__name__)


class AnalysisSession:
    """State of one client's detection view: busy flag, last input and result"""

    def __init__(self, service: DetectionService, delay: float, history_limit: int = 50, session_id: Optional[str] = None):
        self.session_id = session_id or uuid.uuid4().hex
        self.service = service
        self.delay = delay
        self.busy = False
        self.input_text = ""
        self.result: Optional[DetectionResult] = None
        self.history: Deque[HistoryItem] = deque(maxlen=history_limit)
        self._pending: Optional[DelayedAnalysis[DetectionResult]] = None

    @property
    def pending(self) -> Optional[DelayedAnalysis[DetectionResult]]:
        return self._pending

    def start(self, text: str) -> DelayedAnalysis[DetectionResult]:
        """Schedule an analysis of ``text``; one at a time per session.

        Raises:
            EmptyTextError: if ``text`` is empty or whitespace only
            AnalysisInProgressError: if an analysis is still pending
        """
        text = validate_text(text)
        if self.busy:
            raise AnalysisInProgressError(self.session_id)

        self.busy = True
        self.input_text = text
        self._pending = DelayedAnalysis(
            self.delay,
            lambda: self.service.detect(text),
            on_complete=lambda result: self._publish(text, result),
            on_abort=self._abort,
            name=f"analysis-{self.session_id}",
        )
        logger.debug(f"Session {self.session_id}: analysis scheduled in {self.delay}s")
        return self._pending

    def _publish(self, text: str, result: DetectionResult) -> None:
        # A finished analysis always overwrites whatever is currently shown
        self.result = result
        self.history.append(
            HistoryItem(
                id=uuid.uuid4().hex,
                statement=text,
                result=result.prediction,
                confidence=result.confidence,
                explanation=result.explanation,
                timestamp=datetime.now(timezone.utc),
            )
        )
        self.busy = False
        logger.info(
            f"Session {self.session_id}: {result.prediction.value} ({result.confidence}%)"
        )

    def _abort(self) -> None:
        self.busy = False

    def cancel(self) -> bool:
        if self._pending is None or self._pending.done:
            return False
        return self._pending.cancel()

    def clear(self) -> None:
        """Reset the input and the shown result; a pending analysis still publishes"""
        self.input_text = ""
        self.result = None

    def filtered_history(self, history_filter: HistoryFilterEnum = HistoryFilterEnum.ALL) -> List[HistoryItem]:
        items = list(reversed(self.history))
        if history_filter == HistoryFilterEnum.ALL:
            return items
        wanted = PredictionEnum(history_filter.value)
        return [item for item in items if item.result == wanted]

    def statistics(self) -> Statistics:
        if not self.history:
            return Statistics()
        confidences = np.array([item.confidence for item in self.history], dtype=float)
        real = sum(1 for item in self.history if item.result == PredictionEnum.REAL)
        return Statistics(
            total_checks=len(self.history),
            real_news=real,
            fake_news=len(self.history) - real,
            average_confidence=round_half_up(confidences.mean()),
        )

    def state(self) -> SessionState:
        return SessionState(
            session_id=self.session_id,
            busy=self.busy,
            input_text=self.input_text,
            result=self.result,
        )


class SessionCache(TTLCache):
    """TTL cache that cancels the pending analysis of sessions it evicts"""

    def popitem(self):
        key, session = super().popitem()
        session.cancel()
        logger.info(f"Evicted session {key}")
        return key, session

    def expire(self, time=None):
        # TTL expiry removes entries without going through popitem
        expired = super().expire(time)
        for key, session in expired:
            session.cancel()
            logger.info(f"Expired session {key}")
        return expired


class SessionStore:
    """Sessions expire ``ttl`` seconds after they were last created or read"""

    def __init__(self, service: DetectionService, delay: float, ttl: float = 3600, maxsize: int = 1000, history_limit: int = 50, timer=None):
        self.service = service
        self.delay = delay
        self.history_limit = history_limit
        if timer is None:
            self._sessions = SessionCache(maxsize=maxsize, ttl=ttl)
        else:
            self._sessions = SessionCache(maxsize=maxsize, ttl=ttl, timer=timer)

    def create(self) -> AnalysisSession:
        session = AnalysisSession(self.service, self.delay, history_limit=self.history_limit)
        self._sessions[session.session_id] = session
        logger.info(f"Created session {session.session_id}")
        return session

    def get(self, session_id: str) -> AnalysisSession:
        self._sessions.expire()
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        # Re-insert to restart the TTL of an active session
        self._sessions[session_id] = session
        return session

    def __len__(self):
        return len(self._sessions)

    def cancel_all(self) -> int:
        """Cancel every pending analysis, used on shutdown"""
        cancelled = sum(1 for session in list(self._sessions.values()) if session.cancel())
        if cancelled:
            logger.info(f"Cancelled {cancelled} pending analyses")
        return cancelled


__all__ = ['AnalysisSession', 'SessionCache', 'SessionStore']
