"""
Fixed vocabularies, weights and canned texts used by the heuristic detector.

Everything here is built once at import time and exposed read-only.
"""
from types import MappingProxyType

from truthguard.models import TopicEnum

# Lexical vocabularies, matched against the upper-cased text
SENSATIONAL_WORDS = (
    'URGENT', 'BREAKING', 'SHOCKING', 'UNBELIEVABLE',
    'SCIENTISTS HATE THIS', 'MIRACLE', 'SECRET', 'EXCLUSIVE',
)
EMOTIONAL_WORDS = ('AMAZING', 'TERRIBLE', 'DEVASTATING', 'INCREDIBLE', 'OUTRAGEOUS')
CLICKBAIT_PHRASES = ("YOU WON'T BELIEVE", 'WHAT HAPPENS NEXT', 'WILL SHOCK YOU')
QUOTE_CHARS = ('"', "'")

SCORE_WEIGHTS = MappingProxyType({
    'sensational': 25,
    'emotional': 20,
    'clickbait': 30,
    'exclamations': 15,
    'all_caps': 20,
    'short_text': 20,
    'no_quotes': 10,
})

FAKE_THRESHOLD = 45
EXCLAMATION_LIMIT = 2
SHORT_TEXT_LENGTH = 100
ALL_CAPS_MIN_LENGTH = 4
JITTER_MAX = 15.0
CONFIDENCE_FLOOR = 55
CONFIDENCE_CEILING = 95

# Sentence handling
SENTENCE_SPLIT_PATTERN = r'[.!?]+'
MIN_SENTENCE_LENGTH = 10
HEADLINE_MAX_LENGTH = 80
HEADLINE_FALLBACK_LENGTH = 100
MIN_EVENT_LENGTH = 15
MAX_FACTUAL_CLAIMS = 3
MAX_KEY_EVENTS = 4
MAX_TIMELINE_ENTRIES = 3
MAX_PEOPLE = 3
MAX_LOCATIONS = 2

# Topic buckets, checked in this order; first match wins
TOPIC_PATTERNS = (
    (TopicEnum.GOVERNMENT, r'\b(?:government\w*|president\w*|minister\w*|polic(?:y|ies))\b'),
    (TopicEnum.HEALTH, r'\b(?:health\w*|medical\w*|hospital\w*|vaccin\w*)\b'),
    (TopicEnum.TECHNOLOGY, r'\b(?:tech\w*|ai|digital\w*)\b'),
    (TopicEnum.CLIMATE, r'\b(?:climate\w*|environment\w*|warming|carbon\w*)\b'),
    (TopicEnum.ECONOMY, r'\b(?:econom\w*|financ\w*|market\w*|business\w*)\b'),
    (TopicEnum.SPORTS, r'\b(?:sport\w*|team\w*|player\w*|match\w*)\b'),
)

# Entity extraction
PEOPLE_PATTERN = r'\b(?:president|minister|ceo|director|dr\.?|mr\.?|ms\.?|mrs\.?)\s+[a-z]+(?:\s+[a-z]+)?'
LOCATION_PATTERN = r'\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*(?:\s+City|\s+State|\s+Country)?\b'
LOCATION_MIN_LENGTH = 4
LOCATION_STOPWORDS = frozenset({'The', 'This', 'That', 'There', 'When', 'Where', 'What', 'Who', 'How'})

# Timeline tags, checked in order against the lower-cased sentence
TIMELINE_MARKERS = (
    ('Past', ('yesterday', 'last week')),
    ('Current', ('today', 'now')),
    ('Future', ('will', 'plan')),
)

PLACEHOLDERS = MappingProxyType({
    'key_events': 'Main event details extracted from the provided text',
    'people_involved': 'Key individuals mentioned in the story',
    'timeline': 'Timeline information extracted from text structure',
    'location': 'Location information not clearly specified',
    'factual_claims': 'No specific factual claims identified in the provided text',
})

# name -> text for each triggered feature
FACTOR_TEXTS = MappingProxyType({
    'sensational': 'Contains sensationalized language and urgency indicators',
    'emotional': 'Uses highly emotional or charged language',
    'clickbait': 'Exhibits clickbait-style phrasing',
    'exclamations': 'Excessive use of exclamation marks',
    'all_caps': 'Inappropriate capitalization patterns',
    'short_text': 'Unusually brief for comprehensive news coverage',
    'no_quotes': 'Lacks quoted sources or expert opinions',
})
REAL_FACTORS = (
    'Maintains neutral, factual tone',
    'Follows standard journalistic structure',
    'Contains verifiable information patterns',
)

EXPLANATIONS = MappingProxyType({
    True: (
        'This text exhibits multiple characteristics commonly associated with misinformation, '
        'including emotional manipulation, sensationalized language, and urgency tactics designed '
        'to bypass critical thinking.'
    ),
    False: (
        'This text demonstrates characteristics consistent with legitimate journalism, including '
        'neutral tone, factual language, and professional presentation standards.'
    ),
})

REPORT_TEMPLATES = MappingProxyType({
    TopicEnum.GOVERNMENT: MappingProxyType({
        'summary': 'This appears to be a political or governmental news story involving policy decisions, official statements, or administrative actions.',
        'context': 'Government-related news often involves policy changes, political decisions, or official announcements that can affect citizens and institutions.',
        'implications': 'Political developments may have wide-ranging effects on legislation, public services, and citizen rights.',
        'related_topics': ('Politics', 'Public Policy', 'Government Affairs', 'Civic Issues'),
    }),
    TopicEnum.HEALTH: MappingProxyType({
        'summary': 'This appears to be health-related news covering medical developments, public health issues, or healthcare policy.',
        'context': 'Health news typically involves medical research, public health measures, healthcare system changes, or disease-related developments.',
        'implications': 'Health-related developments can directly impact public wellbeing, healthcare access, and medical treatment options.',
        'related_topics': ('Public Health', 'Medical Research', 'Healthcare Policy', 'Disease Prevention'),
    }),
    TopicEnum.TECHNOLOGY: MappingProxyType({
        'summary': 'This appears to be technology news discussing digital innovations, tech industry developments, or technological impacts on society.',
        'context': "Technology news covers innovations, digital trends, cybersecurity, artificial intelligence, and the tech industry's influence on daily life.",
        'implications': 'Technological developments can reshape industries, change how people work and communicate, and create new opportunities or challenges.',
        'related_topics': ('Innovation', 'Digital Transformation', 'Cybersecurity', 'Tech Industry'),
    }),
    TopicEnum.CLIMATE: MappingProxyType({
        'summary': 'This appears to be environmental or climate-related news discussing ecological issues, climate change, or environmental policies.',
        'context': 'Environmental news covers climate change, conservation efforts, pollution, renewable energy, and policies affecting the natural world.',
        'implications': 'Environmental developments affect global sustainability, public health, economic policies, and future living conditions.',
        'related_topics': ('Climate Change', 'Environmental Policy', 'Sustainability', 'Conservation'),
    }),
    TopicEnum.ECONOMY: MappingProxyType({
        'summary': 'This appears to be economic or business news covering financial markets, economic policies, or business developments.',
        'context': 'Economic news involves market trends, financial policies, business performance, employment, and factors affecting economic growth.',
        'implications': 'Economic developments can affect employment, personal finances, business operations, and overall economic stability.',
        'related_topics': ('Financial Markets', 'Economic Policy', 'Business Strategy', 'Employment'),
    }),
    TopicEnum.SPORTS: MappingProxyType({
        'summary': 'This appears to be sports-related news covering athletic competitions, team developments, or sports industry matters.',
        'context': 'Sports news involves competitions, player transfers, team performance, sports governance, and athletic achievements.',
        'implications': 'Sports developments can affect team standings, fan engagement, athlete careers, and the broader sports industry.',
        'related_topics': ('Athletic Competition', 'Sports Management', 'Player Development', 'Sports Entertainment'),
    }),
    TopicEnum.DEFAULT: MappingProxyType({
        'summary': 'This appears to be general news covering current events or developments in various sectors of society.',
        'context': 'The news content discusses current events that may impact communities, institutions, or individuals in various ways.',
        'implications': 'The developments described may have local or broader societal impacts depending on their scope and significance.',
        'related_topics': ('Current Events', 'Social Issues', 'Community News', 'General Interest'),
    }),
})

REAL_NEWS_CONTEXT = MappingProxyType({
    TopicEnum.GOVERNMENT: 'Government policies and decisions often follow established procedures involving multiple stakeholders, public consultations, and legislative processes. Such developments typically have documented precedents and are reported by multiple credible news sources with official statements and expert commentary.',
    TopicEnum.HEALTH: 'Health-related developments usually involve peer-reviewed research, clinical trials, regulatory approvals, and statements from recognized medical institutions. Legitimate health news includes data, statistical evidence, and quotes from qualified medical professionals or researchers.',
    TopicEnum.TECHNOLOGY: 'Technology news generally involves product launches, research breakthroughs, industry partnerships, or regulatory changes. Credible tech reporting includes technical specifications, market analysis, company statements, and expert opinions from industry analysts.',
    TopicEnum.CLIMATE: 'Environmental and climate news typically stems from scientific research, government reports, international agreements, or policy changes. Credible climate reporting includes data from research institutions, quotes from climate scientists, and references to peer-reviewed studies.',
    TopicEnum.ECONOMY: 'Economic news usually involves market data, government statistics, corporate earnings, policy changes, or expert analysis. Legitimate economic reporting includes specific figures, source attribution, and commentary from economists or financial analysts.',
    TopicEnum.DEFAULT: 'This appears to be legitimate news content that follows standard journalistic practices including factual reporting, proper sourcing, balanced presentation, and professional language standards.',
})

FAKE_NEWS_DEBUNKING = MappingProxyType({
    TopicEnum.GOVERNMENT: MappingProxyType({
        'what_actually_happened': 'Government decisions typically follow documented procedures with official announcements through proper channels. Any major policy changes would be reported by multiple credible news sources with official confirmation.',
        'why_its_fake': 'This content uses emotional manipulation, lacks official sources, and employs urgency tactics designed to bypass critical thinking. Legitimate government news includes official statements, proper attribution, and balanced reporting.',
        'correct_information': 'For accurate government news, consult official government websites, established news organizations, and verified press releases. Government actions follow legal procedures and are documented through official channels.',
        'common_misconceptions': (
            'Government decisions are made in secret without public knowledge',
            'Single unofficial sources can reveal major government policies',
            'Emotional or urgent language indicates important government news',
        ),
        'fact_check_sources': ('Official government websites', 'Established news organizations', 'Government press offices', 'Parliamentary records'),
    }),
    TopicEnum.HEALTH: MappingProxyType({
        'what_actually_happened': 'Medical breakthroughs and health policies undergo rigorous scientific review, regulatory approval, and are announced through official medical institutions and peer-reviewed publications.',
        'why_its_fake': 'This content lacks medical expertise, uses emotional language to create urgency, and makes claims without scientific backing. Legitimate health news includes data, expert quotes, and institutional verification.',
        'correct_information': 'Reliable health information comes from medical institutions, peer-reviewed research, health authorities, and qualified medical professionals. Medical claims require scientific evidence and regulatory approval.',
        'common_misconceptions': (
            'Single studies or unverified claims represent medical consensus',
            'Emotional testimonials are equivalent to scientific evidence',
            'Quick fixes or miracle cures are medically credible',
        ),
        'fact_check_sources': ('WHO', 'CDC', 'Medical journals', 'Health department websites', 'Medical institutions'),
    }),
    TopicEnum.TECHNOLOGY: MappingProxyType({
        'what_actually_happened': 'Technology developments are typically announced through official company channels, tech conferences, patent filings, or peer-reviewed research. Major tech news is covered by multiple credible technology publications.',
        'why_its_fake': 'This content uses sensationalized language, lacks technical specificity, and makes extraordinary claims without evidence. Legitimate tech news includes technical details, official statements, and expert analysis.',
        'correct_information': 'Credible technology news comes from official company announcements, recognized tech publications, industry analysts, and technical documentation with verifiable specifications.',
        'common_misconceptions': (
            'Revolutionary breakthroughs happen without industry knowledge',
            'Single sources can reveal major undisclosed technology developments',
            'Sensational claims about technology are usually accurate',
        ),
        'fact_check_sources': ('Official company websites', 'Tech industry publications', 'Patent databases', 'Academic institutions'),
    }),
    TopicEnum.DEFAULT: MappingProxyType({
        'what_actually_happened': 'Legitimate news events are typically reported by multiple credible sources with proper attribution, official statements, and verifiable information. Real news follows journalistic standards and ethics.',
        'why_its_fake': 'This content exhibits characteristics of misinformation including emotional manipulation, lack of credible sources, sensationalized language, and urgency tactics designed to prevent fact-checking.',
        'correct_information': 'For accurate information, consult multiple established news sources, official statements, and verified reports. Look for proper attribution, balanced reporting, and expert commentary.',
        'common_misconceptions': (
            'Sensational or urgent language indicates important news',
            'Single unverified sources provide reliable information',
            'Emotional content is more trustworthy than factual reporting',
        ),
        'fact_check_sources': ('Established news organizations', 'Official sources', 'Fact-checking websites', 'Expert institutions'),
    }),
})

CONTENT_SUMMARY_SUBJECTS = MappingProxyType({
    TopicEnum.GOVERNMENT: 'governmental affairs',
    TopicEnum.HEALTH: 'health-related topics',
    TopicEnum.TECHNOLOGY: 'technology developments',
    TopicEnum.CLIMATE: 'environmental issues',
    TopicEnum.ECONOMY: 'economic matters',
    TopicEnum.SPORTS: 'sports and athletics',
    TopicEnum.DEFAULT: 'general news topics',
})

# Keyed by "is fake"
CONTENT_APPROACH = MappingProxyType({
    True: 'appears to prioritize emotional impact over factual accuracy',
    False: 'maintains a balanced, informative approach',
})
LANGUAGE_ANALYSIS = MappingProxyType({
    True: 'The language pattern shows characteristics commonly associated with misinformation: emotional manipulation, urgency indicators, and sensationalized phrasing designed to provoke strong reactions rather than inform.',
    False: 'The language demonstrates professional journalistic standards with measured tone, factual presentation, and appropriate use of formal news writing conventions.',
})
CREDIBILITY_INDICATORS = MappingProxyType({
    True: (
        'Lack of specific sources or attributions',
        'Emotional language designed to bypass critical thinking',
        'Urgency tactics that discourage fact-checking',
        'Absence of balanced perspectives',
    ),
    False: (
        'Neutral tone suggests objective reporting',
        'Structured presentation of information',
        'Absence of inflammatory language',
        'Professional writing style',
    ),
})
POTENTIAL_BIAS = MappingProxyType({
    True: 'Strong indicators of bias toward sensationalism and emotional manipulation. The content appears designed to generate strong reactions rather than inform readers objectively.',
    False: 'Minimal bias detected. The content appears to maintain journalistic objectivity with balanced language and factual presentation.',
})
RECOMMENDATIONS = MappingProxyType({
    True: (
        'Cross-reference this information with established news sources',
        'Look for original sources and expert opinions',
        'Be cautious of sharing without verification',
        'Consider the motivation behind such sensationalized presentation',
        'Apply critical thinking and fact-checking resources',
    ),
    False: (
        'While this appears credible, still verify through multiple sources',
        'Look for additional context and expert analysis',
        'Check for any updates or corrections to the story',
        'Consider various perspectives on the topic',
    ),
})

# Keyed by "emotional or sensational vocabulary present"
EMOTIONAL_TONE = MappingProxyType({
    True: 'High emotional intensity - designed to provoke strong feelings (anger, fear, excitement) which can impair critical judgment.',
    False: 'Neutral to low emotional intensity - maintains professional distance appropriate for news reporting.',
})
# Keyed by "quotes present"
SOURCE_ANALYSIS = MappingProxyType({
    True: 'Contains quoted material, suggesting some attempt at source attribution. However, verification of these sources would be necessary.',
    False: 'Limited or no apparent source attribution. Credible news typically includes multiple sources and expert opinions.',
})
