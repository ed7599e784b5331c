"""
Placeholder keyword grouping.

Groups keywords into fixed-size groups by input position and attaches
mock similarity vectors. This is a test-data generator for the results
view, not semantic clustering: no SERP fetching or embedding model is
involved.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from config.settings import ClusteringSettings, get_settings
from labeling.intent_classifier import (
    ClassificationResult,
    IntentType,
    KeywordClassifier,
    KeywordRecord
)


@dataclass
class PlaceholderCluster:
    """A positional group of keywords with mock similarity data."""

    cluster_id: int
    primary_keyword: str
    keywords: List[str]
    total_volume: int
    intent: IntentType
    shared_urls: List[str] = field(default_factory=list)
    mock_similarity: float = 1.0

    @property
    def cluster_size(self) -> int:
        return len(self.keywords)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "cluster_id": self.cluster_id,
            "primary_keyword": self.primary_keyword,
            "keywords": list(self.keywords),
            "total_volume": self.total_volume,
            "intent": self.intent.value,
            "cluster_size": self.cluster_size,
            "shared_urls": list(self.shared_urls),
            "mock_similarity": self.mock_similarity
        }


def mock_embeddings(n_keywords: int, dimensions: int = 50) -> np.ndarray:
    """
    Deterministic mock vectors: row i, column j = ((i + j) % 10) / 10.

    Args:
        n_keywords: Number of rows
        dimensions: Vector length

    Returns:
        Array of shape (n_keywords, dimensions)
    """
    rows = np.arange(n_keywords).reshape(-1, 1)
    cols = np.arange(dimensions).reshape(1, -1)
    return ((rows + cols) % 10) / 10


def serp_similarity(urls1: Sequence[str], urls2: Sequence[str]) -> float:
    """Jaccard overlap of two SERP URL lists, 0 if either is empty."""
    if not urls1 or not urls2:
        return 0.0
    a = set(urls1)
    b = set(urls2)
    return len(a & b) / len(a | b)


class PairClusterer:
    """
    Groups keywords into consecutive fixed-size placeholder clusters.
    """

    def __init__(
        self,
        settings: Optional[ClusteringSettings] = None,
        classifier: Optional[KeywordClassifier] = None
    ):
        self.settings = settings or get_settings().clustering
        self.classifier = classifier or KeywordClassifier()

    def cluster_records(
        self,
        records: Sequence[KeywordRecord],
        serp_data: Optional[Dict[str, List[str]]] = None
    ) -> List[PlaceholderCluster]:
        """
        Group classified records by input position.

        Args:
            records: Classified records in input order
            serp_data: Optional keyword -> SERP URLs mapping

        Returns:
            List of PlaceholderCluster ordered by cluster_id
        """
        if not records:
            return []

        serp_data = serp_data or {}
        size = self.settings.cluster_size
        vectors = mock_embeddings(
            len(records),
            self.settings.mock_dimensions
        )

        clusters = []
        for start in range(0, len(records), size):
            members = list(records[start:start + size])
            primary = members[0]

            clusters.append(PlaceholderCluster(
                cluster_id=start // size,
                primary_keyword=primary.keyword,
                keywords=[r.keyword for r in members],
                total_volume=sum(r.volume for r in members),
                intent=self.classifier.detect_intent(primary.keyword),
                shared_urls=list(serp_data.get(primary.keyword, [])),
                mock_similarity=self._mean_similarity(
                    vectors[start:start + len(members)]
                )
            ))

        return clusters

    def cluster_result(
        self,
        result: ClassificationResult,
        serp_data: Optional[Dict[str, List[str]]] = None
    ) -> List[PlaceholderCluster]:
        """Group the records of a classification result."""
        return self.cluster_records(result.records, serp_data)

    @staticmethod
    def _mean_similarity(vectors: np.ndarray) -> float:
        """Mean pairwise cosine similarity; 1.0 for a single vector."""
        n = len(vectors)
        if n < 2:
            return 1.0

        sim = cosine_similarity(vectors)
        upper = sim[np.triu_indices(n, k=1)]
        return round(float(np.mean(upper)), 4)
