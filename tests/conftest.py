"""
Shared fixtures for the Keyword Intent Analyzer tests.
"""
import pytest

from clustering.pair_clusterer import PairClusterer
from config.settings import ClusteringSettings, IngestionSettings
from core.keyword_service import KeywordAnalysisService
from ingestion.csv_parser import CSVParser
from labeling.intent_classifier import KeywordClassifier


@pytest.fixture
def classifier():
    return KeywordClassifier()


@pytest.fixture
def parser():
    return CSVParser(IngestionSettings())


@pytest.fixture
def clusterer(classifier):
    return PairClusterer(ClusteringSettings(), classifier)


@pytest.fixture
def service(classifier, parser, clusterer):
    return KeywordAnalysisService(classifier, parser, clusterer)


@pytest.fixture
def sample_result(classifier):
    """One informational-heavy batch touching three intents."""
    return classifier.analyze(
        [
            "nike shoes guide",
            "buy shoes",
            "best shoes",
            "how to tie shoes",
        ],
        [10, 500, 300, 0]
    )
