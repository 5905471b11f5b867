import re
from typing import Optional, Tuple
from functools import lru_cache
import numpy as np
import logging

from truthguard.models import TopicEnum
from truthguard.schemas.detection import LexicalFeatures, SuspicionScore
from truthguard.services import lexicon

logger = logging.getLogger(__name__)

# Singleton pattern, the compiled patterns are shared by every request
_ANALYZER_INSTANCE = None


def get_analyzer() -> 'FakeNewsAnalyzer':
    """Factory function for analyzer instance with singleton pattern"""
    global _ANALYZER_INSTANCE
    if _ANALYZER_INSTANCE is None:
        _ANALYZER_INSTANCE = FakeNewsAnalyzer()
    return _ANALYZER_INSTANCE


def round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


class FakeNewsAnalyzer:
    """Lexical feature extraction, suspicion scoring and topic classification"""

    def __init__(self):
        self.patterns = {}
        self._compile_patterns()
        logger.info("Fake news analyzer initialized")

    def _compile_patterns(self) -> None:
        """Compile the lexicon regexes once"""
        sources = {
            'sentence_split': lexicon.SENTENCE_SPLIT_PATTERN,
            'people': lexicon.PEOPLE_PATTERN,
            'location': lexicon.LOCATION_PATTERN,
        }
        flags = {'people': re.IGNORECASE}
        for name, pattern in sources.items():
            self.patterns[name] = re.compile(pattern, flags.get(name, 0))

        # Topic buckets keep their priority order
        self.patterns['topics'] = tuple(
            (topic, re.compile(pattern)) for topic, pattern in lexicon.TOPIC_PATTERNS
        )

    def extract_features(self, text: str) -> LexicalFeatures:
        """Detect the lexical signals of sensational writing in ``text``.

        All vocabulary checks are substring checks on the upper-cased text,
        so "breaking" and "BREAKING" count the same.
        """
        upper = text.upper()
        exclamation_count = text.count('!')
        length = len(text)

        return LexicalFeatures(
            has_sensational_words=any(word in upper for word in lexicon.SENSATIONAL_WORDS),
            has_emotional_words=any(word in upper for word in lexicon.EMOTIONAL_WORDS),
            has_clickbait=any(phrase in upper for phrase in lexicon.CLICKBAIT_PHRASES),
            exclamation_count=exclamation_count,
            has_excessive_exclamations=exclamation_count > lexicon.EXCLAMATION_LIMIT,
            # Tokens without letters ("2024!!!", "$1,000") count as shouting too
            has_all_caps=any(
                len(word) >= lexicon.ALL_CAPS_MIN_LENGTH and word == word.upper()
                for word in text.split(' ')
            ),
            has_quotes=any(quote in text for quote in lexicon.QUOTE_CHARS),
            length=length,
            is_short=length < lexicon.SHORT_TEXT_LENGTH,
        )

    def base_score(self, features: LexicalFeatures) -> int:
        """Deterministic part of the suspicion score"""
        weights = lexicon.SCORE_WEIGHTS
        triggered = {
            'sensational': features.has_sensational_words,
            'emotional': features.has_emotional_words,
            'clickbait': features.has_clickbait,
            'exclamations': features.has_excessive_exclamations,
            'all_caps': features.has_all_caps,
            'short_text': features.is_short,
            'no_quotes': not features.has_quotes,
        }
        return sum(weights[name] for name, hit in triggered.items() if hit)

    def score_features(self, features: LexicalFeatures, jitter: float = 0.0) -> SuspicionScore:
        """Combine the features and a random term into a label and confidence.

        Args:
            features: output of ``extract_features``
            jitter: random term in ``[0, JITTER_MAX)``, drawn by the caller

        Returns:
            SuspicionScore with ``is_fake`` set when the total exceeds
            ``FAKE_THRESHOLD`` and an integer confidence in [55, 95]
        """
        if not 0 <= jitter < lexicon.JITTER_MAX:
            raise ValueError(f"jitter must be in [0, {lexicon.JITTER_MAX}), got {jitter}")

        base = self.base_score(features)
        total = base + jitter
        is_fake = total > lexicon.FAKE_THRESHOLD

        if is_fake:
            raw_confidence = 60 + total * 0.5
        else:
            raw_confidence = 90 - total * 0.8
        confidence = round_half_up(
            np.clip(raw_confidence, lexicon.CONFIDENCE_FLOOR, lexicon.CONFIDENCE_CEILING)
        )

        return SuspicionScore(
            base=base,
            jitter=jitter,
            total=total,
            is_fake=is_fake,
            confidence=confidence,
        )

    def classify_topic(self, text: str) -> TopicEnum:
        """Return the first topic bucket whose keywords occur in ``text``"""
        lowered = text.lower()
        for topic, pattern in self.patterns['topics']:
            if pattern.search(lowered):
                return topic
        return TopicEnum.DEFAULT

    @lru_cache(maxsize=256)
    def split_sentences(self, text: str) -> Tuple[str, ...]:
        """Split on runs of . ! ? and keep sentences longer than 10 characters"""
        parts = self.patterns['sentence_split'].split(text)
        return tuple(
            part.strip() for part in parts
            if len(part.strip()) > lexicon.MIN_SENTENCE_LENGTH
        )

    def find_people(self, text: str, limit: Optional[int] = None) -> Tuple[str, ...]:
        """Title-prefixed names such as "Dr. Sarah Chen" or "President Lee"."""
        limit = lexicon.MAX_PEOPLE if limit is None else limit
        matches = (m.group(0).strip() for m in self.patterns['people'].finditer(text))
        return tuple(matches)[:limit]

    def find_locations(self, text: str, limit: Optional[int] = None) -> Tuple[str, ...]:
        limit = lexicon.MAX_LOCATIONS if limit is None else limit
        found = []
        for match in self.patterns['location'].finditer(text):
            candidate = match.group(0)
            if len(candidate) < lexicon.LOCATION_MIN_LENGTH:
                continue
            if candidate in lexicon.LOCATION_STOPWORDS:
                continue
            found.append(candidate)
            if len(found) == limit:
                break
        return tuple(found)


__all__ = ['FakeNewsAnalyzer', 'get_analyzer', 'round_half_up']
