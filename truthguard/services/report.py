"""
Templated report synthesis for a scored text.

All builders are total over arbitrary strings: when an extraction finds
nothing the section falls back to a placeholder instead of failing.
"""
from typing import List, Sequence

from truthguard.models import TopicEnum
from truthguard.schemas.detection import (
    ContextualInfo,
    DetailedAnalysis,
    FakeNewsDebunking,
    LexicalFeatures,
    NewsReport,
    SuspicionScore,
)
from truthguard.services import lexicon
from truthguard.services.analyzer import FakeNewsAnalyzer


def make_headline(sentences: Sequence[str], text: str) -> str:
    first = sentences[0] if sentences else text[:lexicon.HEADLINE_FALLBACK_LENGTH].strip()
    if len(first) > lexicon.HEADLINE_MAX_LENGTH:
        return first[:lexicon.HEADLINE_MAX_LENGTH - 3] + "..."
    return first


def make_key_events(sentences: Sequence[str]) -> List[str]:
    events = [
        f"Event {index}: {sentence}"
        for index, sentence in enumerate(sentences[:lexicon.MAX_KEY_EVENTS], start=1)
    ]
    return [event for event in events if len(event) > lexicon.MIN_EVENT_LENGTH]


def tag_timeline_entry(sentence: str, index: int) -> str:
    lowered = sentence.lower()
    for tag, markers in lexicon.TIMELINE_MARKERS:
        if any(marker in lowered for marker in markers):
            return f"{tag}: {sentence}"
    return f"Step {index}: {sentence}"


def make_timeline(sentences: Sequence[str]) -> List[str]:
    return [
        tag_timeline_entry(sentence, index)
        for index, sentence in enumerate(sentences[:lexicon.MAX_TIMELINE_ENTRIES], start=1)
    ]


def _or_placeholder(items: Sequence[str], key: str) -> List[str]:
    return list(items) if items else [lexicon.PLACEHOLDERS[key]]


def build_news_report(analyzer: FakeNewsAnalyzer, text: str, topic: TopicEnum) -> NewsReport:
    sentences = analyzer.split_sentences(text)
    template = lexicon.REPORT_TEMPLATES[topic]
    locations = analyzer.find_locations(text)

    return NewsReport(
        headline=make_headline(sentences, text),
        summary=template['summary'],
        key_events=_or_placeholder(make_key_events(sentences), 'key_events'),
        people_involved=_or_placeholder(analyzer.find_people(text), 'people_involved'),
        timeline=_or_placeholder(make_timeline(sentences), 'timeline'),
        location=", ".join(locations) if locations else lexicon.PLACEHOLDERS['location'],
        context=template['context'],
        implications=template['implications'],
        related_topics=list(template['related_topics']),
        topic=topic,
    )


def build_contextual_info(topic: TopicEnum, is_fake: bool) -> ContextualInfo:
    if not is_fake:
        context = lexicon.REAL_NEWS_CONTEXT.get(topic, lexicon.REAL_NEWS_CONTEXT[TopicEnum.DEFAULT])
        return ContextualInfo(real_news_context=context)

    entry = lexicon.FAKE_NEWS_DEBUNKING.get(topic, lexicon.FAKE_NEWS_DEBUNKING[TopicEnum.DEFAULT])
    return ContextualInfo(
        fake_news_debunking=FakeNewsDebunking(
            what_actually_happened=entry['what_actually_happened'],
            why_its_fake=entry['why_its_fake'],
            correct_information=entry['correct_information'],
            common_misconceptions=list(entry['common_misconceptions']),
            fact_check_sources=list(entry['fact_check_sources']),
        )
    )


def build_detailed_analysis(
    analyzer: FakeNewsAnalyzer,
    text: str,
    features: LexicalFeatures,
    score: SuspicionScore,
    topic: TopicEnum,
) -> DetailedAnalysis:
    is_fake = score.is_fake
    claims = analyzer.split_sentences(text)[:lexicon.MAX_FACTUAL_CLAIMS]
    subject = lexicon.CONTENT_SUMMARY_SUBJECTS[topic]
    emotional = features.has_sensational_words or features.has_emotional_words

    return DetailedAnalysis(
        content_summary=(
            f"This {features.length}-character text discusses {subject}. "
            f"The content {lexicon.CONTENT_APPROACH[is_fake]}."
        ),
        language_analysis=lexicon.LANGUAGE_ANALYSIS[is_fake],
        credibility_indicators=list(lexicon.CREDIBILITY_INDICATORS[is_fake]),
        potential_bias=lexicon.POTENTIAL_BIAS[is_fake],
        factual_claims=_or_placeholder(claims, 'factual_claims'),
        emotional_tone=lexicon.EMOTIONAL_TONE[emotional],
        source_analysis=lexicon.SOURCE_ANALYSIS[features.has_quotes],
        recommendations=list(lexicon.RECOMMENDATIONS[is_fake]),
    )


def build_factors(features: LexicalFeatures, is_fake: bool) -> List[str]:
    texts = lexicon.FACTOR_TEXTS
    triggered = (
        ('sensational', features.has_sensational_words),
        ('emotional', features.has_emotional_words),
        ('clickbait', features.has_clickbait),
        ('exclamations', features.has_excessive_exclamations),
        ('all_caps', features.has_all_caps),
        ('short_text', features.is_short),
        # Short texts are already flagged for brevity
        ('no_quotes', not features.has_quotes and features.length > lexicon.SHORT_TEXT_LENGTH),
    )
    factors = [texts[name] for name, hit in triggered if hit]
    if not is_fake:
        factors.extend(lexicon.REAL_FACTORS)
    return factors


__all__ = [
    'build_contextual_info',
    'build_detailed_analysis',
    'build_factors',
    'build_news_report',
    'make_headline',
    'make_key_events',
    'make_timeline',
]
