import numpy as np
import pytest

from clustering.pair_clusterer import PairClusterer, mock_embeddings, serp_similarity
from config.settings import ClusteringSettings
from labeling.intent_classifier import IntentType


def test_mock_embeddings_pattern():
    vectors = mock_embeddings(3, 5)

    assert vectors.shape == (3, 5)
    np.testing.assert_allclose(vectors[0], [0.0, 0.1, 0.2, 0.3, 0.4])
    np.testing.assert_allclose(vectors[1], [0.1, 0.2, 0.3, 0.4, 0.5])


def test_mock_embeddings_wrap_at_ten():
    vectors = mock_embeddings(1, 12)
    assert vectors[0, 10] == 0.0
    assert vectors[0, 11] == pytest.approx(0.1)


def test_serp_similarity():
    assert serp_similarity(["a", "b"], ["b", "c"]) == pytest.approx(1 / 3)
    assert serp_similarity(["a"], ["a"]) == 1.0
    assert serp_similarity([], ["a"]) == 0.0
    assert serp_similarity(None, ["a"]) == 0.0


def test_pairs_by_input_position(clusterer, classifier):
    result = classifier.analyze(
        ["buy shoes", "shoe guide", "best shoes", "nike app", "shoe care"],
        [10, 20, 30, 40, 50]
    )

    clusters = clusterer.cluster_result(result)

    assert [c.cluster_id for c in clusters] == [0, 1, 2]
    assert [c.keywords for c in clusters] == [
        ["buy shoes", "shoe guide"],
        ["best shoes", "nike app"],
        ["shoe care"],
    ]
    assert [c.total_volume for c in clusters] == [30, 70, 50]
    assert [c.primary_keyword for c in clusters] == [
        "buy shoes", "best shoes", "shoe care"
    ]
    assert [c.intent for c in clusters] == [
        IntentType.TRANSACTIONAL,
        IntentType.COMMERCIAL,
        IntentType.INFORMATIONAL,
    ]
    assert clusters[2].cluster_size == 1
    assert clusters[2].mock_similarity == 1.0
    assert 0.0 < clusters[0].mock_similarity <= 1.0


def test_cluster_size_setting(classifier):
    clusterer = PairClusterer(ClusteringSettings(cluster_size=3), classifier)
    result = classifier.analyze(["a", "b", "c", "d"])

    clusters = clusterer.cluster_result(result)
    assert [c.cluster_size for c in clusters] == [3, 1]


def test_shared_urls_from_serp_data(clusterer, classifier):
    result = classifier.analyze(["seo tips", "seo tools"])
    serp_data = {"seo tips": ["https://a.example", "https://b.example"]}

    clusters = clusterer.cluster_result(result, serp_data)
    assert clusters[0].shared_urls == ["https://a.example", "https://b.example"]


def test_empty_records(clusterer):
    assert clusterer.cluster_records([]) == []


def test_to_dict(clusterer, classifier):
    result = classifier.analyze(["best shoes", "buy shoes"], [1, 2])
    data = clusterer.cluster_result(result)[0].to_dict()

    assert data["intent"] == "Commercial"
    assert data["cluster_size"] == 2
    assert data["shared_urls"] == []
