from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from truthguard.models import PredictionEnum, TopicEnum


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DetectionRequest(BaseModel):
    content: str = Field(
        ...,
        description="The news statement or article to analyze."
    )


class LexicalFeatures(BaseModel):
    """Boolean and numeric lexical signals extracted from the input text"""
    model_config = ConfigDict(frozen=True)

    has_sensational_words: bool
    has_emotional_words: bool
    has_clickbait: bool
    exclamation_count: int
    has_excessive_exclamations: bool
    has_all_caps: bool
    has_quotes: bool
    length: int
    is_short: bool


class SuspicionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: int
    jitter: float
    total: float
    is_fake: bool
    confidence: int


class FakeNewsDebunking(CamelModel):
    what_actually_happened: str
    why_its_fake: str
    correct_information: str
    common_misconceptions: List[str]
    fact_check_sources: List[str]


class ContextualInfo(CamelModel):
    real_news_context: Optional[str] = None
    fake_news_debunking: Optional[FakeNewsDebunking] = None


class NewsReport(CamelModel):
    headline: str
    summary: str
    key_events: List[str]
    people_involved: List[str]
    timeline: List[str]
    location: str
    context: str
    implications: str
    related_topics: List[str]
    topic: TopicEnum


class DetailedAnalysis(CamelModel):
    content_summary: str
    language_analysis: str
    credibility_indicators: List[str]
    potential_bias: str
    factual_claims: List[str]
    emotional_tone: str
    source_analysis: str
    recommendations: List[str]


class DetectionResult(CamelModel):
    prediction: PredictionEnum
    confidence: int = Field(..., ge=55, le=95)
    explanation: str
    factors: List[str]
    contextual_info: ContextualInfo
    news_report: NewsReport
    detailed_analysis: DetailedAnalysis
