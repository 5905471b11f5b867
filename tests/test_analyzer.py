import pytest

from truthguard.models import TopicEnum
from truthguard.services import lexicon
from truthguard.services.analyzer import get_analyzer, round_half_up

from conftest import NEUTRAL_TEXT, SENSATIONAL_TEXT


def test_get_analyzer_returns_singleton():
    assert get_analyzer() is get_analyzer()


def test_sensational_example_features(analyzer):
    features = analyzer.extract_features(SENSATIONAL_TEXT)

    assert features.has_sensational_words
    assert not features.has_emotional_words
    assert not features.has_clickbait
    assert features.exclamation_count == 3
    assert features.has_excessive_exclamations
    assert features.has_all_caps
    assert not features.has_quotes
    assert features.is_short
    assert features.length == len(SENSATIONAL_TEXT)


def test_vocabulary_checks_ignore_case(analyzer):
    features = analyzer.extract_features("an amazing secret, you won't believe what happens next")

    assert features.has_sensational_words
    assert features.has_emotional_words
    assert features.has_clickbait


def test_two_exclamations_are_not_excessive(analyzer):
    features = analyzer.extract_features("Wow! Really!")
    assert features.exclamation_count == 2
    assert not features.has_excessive_exclamations


@pytest.mark.parametrize("text,expected", [
    ("The NASA report was published", True),
    ("The USA team won", False),  # three letters is not long enough
    ("Figures for 2024 were released", True),  # no lower-case letters either
    ("Prices start at $1,000 now", True),
    ("Nothing shouted here", False),
])
def test_all_caps_detection(analyzer, text, expected):
    assert analyzer.extract_features(text).has_all_caps is expected


def test_numeric_token_pushes_short_text_over_threshold(analyzer):
    features = analyzer.extract_features("Rain expected in 2024!!!")
    assert features.has_all_caps
    # short + no quotes + exclamations + all caps
    assert analyzer.base_score(features) == 65
    assert analyzer.score_features(features, 0.0).is_fake


def test_apostrophe_counts_as_quote(analyzer):
    assert analyzer.extract_features("The mayor's office confirmed it").has_quotes


def test_feature_extraction_is_idempotent(analyzer):
    first = analyzer.extract_features(NEUTRAL_TEXT)
    second = analyzer.extract_features(NEUTRAL_TEXT)
    assert first == second


def test_base_score_of_sensational_example(analyzer):
    features = analyzer.extract_features(SENSATIONAL_TEXT)
    # sensational + exclamations + all caps + short + no quotes
    assert analyzer.base_score(features) == 25 + 15 + 20 + 20 + 10


def test_sensational_example_is_fake_with_any_jitter(analyzer):
    features = analyzer.extract_features(SENSATIONAL_TEXT)
    for jitter in (0.0, 7.5, 14.99):
        score = analyzer.score_features(features, jitter)
        assert score.is_fake
        assert 60 <= score.confidence <= 95


def test_neutral_example_is_real(analyzer):
    features = analyzer.extract_features(NEUTRAL_TEXT)
    assert analyzer.base_score(features) == 0

    for jitter in (0.0, 14.99):
        score = analyzer.score_features(features, jitter)
        assert not score.is_fake
        assert 55 <= score.confidence <= 90


def test_threshold_boundary_depends_on_jitter(analyzer):
    # short text without quotes: 20 + 10, plus excessive exclamations: 15
    features = analyzer.extract_features("Rain expected later!!!")
    assert analyzer.base_score(features) == 45

    at_threshold = analyzer.score_features(features, 0.0)
    assert not at_threshold.is_fake
    assert at_threshold.confidence == 55  # 90 - 0.8 * 45 = 54, clamped

    above = analyzer.score_features(features, 0.5)
    assert above.is_fake
    assert above.total == pytest.approx(45.5)
    assert above.confidence == 83  # 60 + 22.75 rounds to 83


def test_confidence_is_clamped_to_ceiling(analyzer):
    features = analyzer.extract_features(
        "SHOCKING!!! You won't believe this AMAZING miracle"
    )
    score = analyzer.score_features(features, 14.0)
    assert score.is_fake
    assert score.confidence == lexicon.CONFIDENCE_CEILING


@pytest.mark.parametrize("jitter", [-0.1, 15.0, 20.0])
def test_jitter_out_of_range_is_rejected(analyzer, jitter):
    features = analyzer.extract_features(NEUTRAL_TEXT)
    with pytest.raises(ValueError):
        analyzer.score_features(features, jitter)


def test_round_half_up():
    assert round_half_up(82.5) == 83
    assert round_half_up(54.5) == 55
    assert round_half_up(70.49) == 70


@pytest.mark.parametrize("text,topic", [
    ("The president announced a new vaccine program", TopicEnum.GOVERNMENT),
    ("Hospital admissions fell after the vaccine rollout", TopicEnum.HEALTH),
    ("A new AI chip was unveiled", TopicEnum.TECHNOLOGY),
    ("Carbon emissions rose again", TopicEnum.CLIMATE),
    ("Financial markets rallied", TopicEnum.ECONOMY),
    ("The team won the final match", TopicEnum.SPORTS),
    ("A cat was rescued from a tree", TopicEnum.DEFAULT),
])
def test_classify_topic(analyzer, text, topic):
    assert analyzer.classify_topic(text) == topic


def test_topic_keywords_match_at_word_start(analyzer):
    # "said" and "again" contain "ai" but are not about technology
    assert analyzer.classify_topic("She said it would rain again") == TopicEnum.DEFAULT


def test_split_sentences_drops_short_fragments(analyzer):
    sentences = analyzer.split_sentences("Hi. This sentence is long enough! Ok? Another valid sentence here")
    assert sentences == ("This sentence is long enough", "Another valid sentence here")


def test_find_people_requires_title(analyzer):
    text = "Dr. Sarah Chen met President Lee. John Smith was absent."
    people = analyzer.find_people(text)
    assert people[0] == "Dr. Sarah Chen"
    assert people[1].startswith("President Lee")
    assert all("John" not in person for person in people)


def test_find_people_is_limited_to_three(analyzer):
    text = "Mr. Alpha and Mr. Beta and Mr. Gamma and Mr. Delta"
    assert len(analyzer.find_people(text)) == 3


def test_find_locations_skips_stopwords(analyzer):
    locations = analyzer.find_locations("The storm hit Geneva and then Kansas City overnight")
    assert locations == ("Geneva", "Kansas City")


def test_policies_count_as_government(analyzer):
    assert analyzer.classify_topic("New housing policies were announced today") == TopicEnum.GOVERNMENT
