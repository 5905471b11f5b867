import os

# Settings are read at import time
os.environ["ANALYSIS_DELAY_SECONDS"] = "0"
os.environ["SCORE_JITTER_MAX"] = "0"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from truthguard.services.analyzer import FakeNewsAnalyzer
from truthguard.services.detection import DetectionService


SENSATIONAL_TEXT = "BREAKING: Scientists say the moon is made of cheese!!!"

NEUTRAL_TEXT = (
    "The city council approved the annual budget on Tuesday after a lengthy public "
    "hearing. \"We have balanced the needs of residents with the available revenue,\" "
    "said council member Dana Ortiz, who chairs the finance committee. The budget "
    "includes funding for road repairs and library hours."
)


class FixedRng:
    """Stand-in for numpy.random.Generator returning a fixed unit draw"""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


@pytest.fixture
def analyzer():
    return FakeNewsAnalyzer()


@pytest.fixture
def service(analyzer):
    return DetectionService(analyzer=analyzer, jitter_max=0.0, delay=0.0)


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client
