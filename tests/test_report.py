from truthguard.models import TopicEnum
from truthguard.services import lexicon
from truthguard.services.report import (
    build_contextual_info,
    build_detailed_analysis,
    build_factors,
    build_news_report,
    make_headline,
    make_key_events,
    make_timeline,
)

from conftest import NEUTRAL_TEXT, SENSATIONAL_TEXT


def test_long_first_sentence_is_truncated_to_80_characters():
    sentence = "A" * 30 + " " + "b" * 70
    headline = make_headline((sentence,), sentence)
    assert len(headline) == 80
    assert headline.endswith("...")
    assert headline[:77] == sentence[:77]


def test_exactly_80_characters_is_kept():
    sentence = "x" * 80
    assert make_headline((sentence,), sentence) == sentence


def test_headline_falls_back_to_text_prefix():
    assert make_headline((), "Too short!") == "Too short!"


def test_key_events_are_numbered_and_limited():
    sentences = tuple(f"Sentence number {i} here" for i in range(1, 7))
    events = make_key_events(sentences)
    assert len(events) == lexicon.MAX_KEY_EVENTS
    assert events[0] == "Event 1: Sentence number 1 here"


def test_timeline_tags_by_tense_keywords():
    sentences = (
        "The bridge collapsed yesterday evening",
        "Crews are on site today",
        "Officials will reopen the road",
    )
    assert make_timeline(sentences) == [
        "Past: The bridge collapsed yesterday evening",
        "Current: Crews are on site today",
        "Future: Officials will reopen the road",
    ]


def test_timeline_uses_steps_without_keywords():
    assert make_timeline(("Rain fell across the region",)) == ["Step 1: Rain fell across the region"]


def test_report_sections_are_never_empty(analyzer):
    report = build_news_report(analyzer, "ok then!", TopicEnum.DEFAULT)

    assert report.key_events == [lexicon.PLACEHOLDERS['key_events']]
    assert report.people_involved == [lexicon.PLACEHOLDERS['people_involved']]
    assert report.timeline == [lexicon.PLACEHOLDERS['timeline']]
    assert report.location == lexicon.PLACEHOLDERS['location']
    assert report.headline == "ok then!"
    assert report.related_topics == list(lexicon.REPORT_TEMPLATES[TopicEnum.DEFAULT]['related_topics'])


def test_report_uses_topic_templates(analyzer):
    text = "Dr. Maria Rodriguez said the hospital in Boston will expand its vaccine clinic."
    report = build_news_report(analyzer, text, TopicEnum.HEALTH)

    assert report.topic == TopicEnum.HEALTH
    assert report.summary == lexicon.REPORT_TEMPLATES[TopicEnum.HEALTH]['summary']
    assert "Public Health" in report.related_topics
    assert report.people_involved[0].startswith("Dr. Maria Rodriguez")
    assert "Boston" in report.location
    assert report.timeline[0].startswith("Future: ")


def test_real_context_for_real_news():
    info = build_contextual_info(TopicEnum.CLIMATE, is_fake=False)
    assert info.real_news_context == lexicon.REAL_NEWS_CONTEXT[TopicEnum.CLIMATE]
    assert info.fake_news_debunking is None


def test_sports_real_context_falls_back_to_default():
    info = build_contextual_info(TopicEnum.SPORTS, is_fake=False)
    assert info.real_news_context == lexicon.REAL_NEWS_CONTEXT[TopicEnum.DEFAULT]


def test_debunking_for_fake_news_falls_back_to_default():
    health = build_contextual_info(TopicEnum.HEALTH, is_fake=True)
    assert "WHO" in health.fake_news_debunking.fact_check_sources
    assert health.real_news_context is None

    economy = build_contextual_info(TopicEnum.ECONOMY, is_fake=True)
    expected = lexicon.FAKE_NEWS_DEBUNKING[TopicEnum.DEFAULT]['why_its_fake']
    assert economy.fake_news_debunking.why_its_fake == expected


def test_factors_for_fake_text(analyzer):
    features = analyzer.extract_features(SENSATIONAL_TEXT)
    factors = build_factors(features, is_fake=True)

    assert factors == [
        lexicon.FACTOR_TEXTS['sensational'],
        lexicon.FACTOR_TEXTS['exclamations'],
        lexicon.FACTOR_TEXTS['all_caps'],
        lexicon.FACTOR_TEXTS['short_text'],
    ]


def test_factors_for_real_text_include_neutral_tone(analyzer):
    features = analyzer.extract_features(NEUTRAL_TEXT)
    factors = build_factors(features, is_fake=False)
    assert factors == list(lexicon.REAL_FACTORS)


def test_missing_quotes_factor_only_for_long_text(analyzer):
    long_text = "The committee met on Monday to review the proposal in detail " * 3
    features = analyzer.extract_features(long_text)
    assert lexicon.FACTOR_TEXTS['no_quotes'] in build_factors(features, is_fake=False)


def test_detailed_analysis(analyzer):
    features = analyzer.extract_features(SENSATIONAL_TEXT)
    score = analyzer.score_features(features, 0.0)
    analysis = build_detailed_analysis(analyzer, SENSATIONAL_TEXT, features, score, TopicEnum.DEFAULT)

    assert analysis.content_summary.startswith(f"This {len(SENSATIONAL_TEXT)}-character text discusses general news topics.")
    assert analysis.emotional_tone == lexicon.EMOTIONAL_TONE[True]
    assert analysis.source_analysis == lexicon.SOURCE_ANALYSIS[False]
    assert analysis.recommendations == list(lexicon.RECOMMENDATIONS[True])
    assert analysis.factual_claims == ["BREAKING: Scientists say the moon is made of cheese"]
