from typing import Optional
import numpy as np
import logging

from truthguard.core.errors import EmptyTextError
from truthguard.models import PredictionEnum
from truthguard.schemas.detection import DetectionResult
from truthguard.services import lexicon
from truthguard.services.analyzer import FakeNewsAnalyzer, get_analyzer
from truthguard.services.delayed import DelayedAnalysis
from truthguard.services.report import (
    build_contextual_info,
    build_detailed_analysis,
    build_factors,
    build_news_report,
)

logger = logging.getLogger(__name__)


def validate_text(text: Optional[str]) -> str:
    """Reject empty or whitespace-only input before any computation"""
    if not isinstance(text, str) or not text.strip():
        raise EmptyTextError()
    return text


class DetectionService:
    """Heuristic fake news detection: features, score, topic and report"""

    def __init__(
        self,
        analyzer: Optional[FakeNewsAnalyzer] = None,
        rng: Optional[np.random.Generator] = None,
        jitter_max: float = lexicon.JITTER_MAX,
        delay: float = 0.0,
    ):
        self.analyzer = analyzer or get_analyzer()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.jitter_max = min(max(0.0, jitter_max), lexicon.JITTER_MAX)
        self.delay = delay
        logger.info(
            f"Detection service ready (jitter_max={self.jitter_max}, delay={self.delay}s)"
        )

    def draw_jitter(self) -> float:
        if self.jitter_max <= 0:
            return 0.0
        # Half-open [0, jitter_max), rounding must never reach the bound
        jitter = float(self.rng.random()) * self.jitter_max
        return min(jitter, float(np.nextafter(self.jitter_max, 0.0)))

    def detect(self, text: str, jitter: Optional[float] = None) -> DetectionResult:
        """Classify ``text`` as Real or Fake and build the full report.

        Raises:
            EmptyTextError: if ``text`` is empty or whitespace only
        """
        text = validate_text(text)
        if jitter is None:
            jitter = self.draw_jitter()

        features = self.analyzer.extract_features(text)
        score = self.analyzer.score_features(features, jitter)
        topic = self.analyzer.classify_topic(text)
        logger.debug(
            f"Scored text of length {features.length}: base={score.base} "
            f"jitter={score.jitter:.2f} total={score.total:.2f} topic={topic.value}"
        )

        return DetectionResult(
            prediction=PredictionEnum.FAKE if score.is_fake else PredictionEnum.REAL,
            confidence=score.confidence,
            explanation=lexicon.EXPLANATIONS[score.is_fake],
            factors=build_factors(features, score.is_fake),
            contextual_info=build_contextual_info(topic, score.is_fake),
            news_report=build_news_report(self.analyzer, text, topic),
            detailed_analysis=build_detailed_analysis(self.analyzer, text, features, score, topic),
        )

    async def analyze_news(self, text: str) -> DetectionResult:
        """Validate immediately, then publish the result after the synthetic delay"""
        text = validate_text(text)
        return await DelayedAnalysis(self.delay, lambda: self.detect(text), name="detect")


__all__ = ['DetectionService', 'validate_text']
