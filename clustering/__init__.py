"""
Clustering module for the Keyword Intent Analyzer.

Placeholder only: keywords are grouped by input position with mock
similarity vectors.
"""
from clustering.pair_clusterer import (
    PairClusterer,
    PlaceholderCluster,
    mock_embeddings,
    serp_similarity
)

__all__ = [
    "PairClusterer",
    "PlaceholderCluster",
    "mock_embeddings",
    "serp_similarity",
]
