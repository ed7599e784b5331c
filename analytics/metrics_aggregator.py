"""
Metrics aggregation for intent buckets.
"""
from typing import Dict, List
from dataclasses import dataclass
import numpy as np

from labeling.intent_classifier import (
    ClassificationResult,
    IntentType,
    KeywordRecord
)


@dataclass
class IntentMetrics:
    """Aggregated metrics for one intent bucket."""

    keyword_count: int = 0
    total_volume: int = 0
    avg_volume: int = 0
    max_volume: int = 0
    min_volume: int = 0
    share: float = 0.0  # Fraction of all keywords in the batch

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "keyword_count": self.keyword_count,
            "total_volume": self.total_volume,
            "avg_volume": self.avg_volume,
            "max_volume": self.max_volume,
            "min_volume": self.min_volume,
            "share": self.share
        }


class MetricsAggregator:
    """
    Aggregates volume metrics per intent.
    """

    def aggregate_bucket(
        self,
        records: List[KeywordRecord],
        total_keywords: int = 0
    ) -> IntentMetrics:
        """
        Aggregate metrics for one bucket.

        Args:
            records: Records in the bucket
            total_keywords: Batch size, used for the share

        Returns:
            IntentMetrics with aggregated values
        """
        if not records:
            return IntentMetrics()

        volumes = np.array([r.volume for r in records])

        return IntentMetrics(
            keyword_count=len(records),
            total_volume=int(volumes.sum()),
            # Round half up
            avg_volume=int(np.floor(volumes.mean() + 0.5)),
            max_volume=int(volumes.max()),
            min_volume=int(volumes.min()),
            share=(
                len(records) / total_keywords if total_keywords else 0.0
            )
        )

    def aggregate_buckets(
        self,
        result: ClassificationResult
    ) -> Dict[IntentType, IntentMetrics]:
        """
        Aggregate metrics for all four intents.

        Args:
            result: Classification result

        Returns:
            Dict mapping every IntentType -> IntentMetrics
        """
        total = result.stats.total_keywords
        return {
            intent: self.aggregate_bucket(result.bucket(intent), total)
            for intent in IntentType
        }

    def get_summary(self, result: ClassificationResult) -> dict:
        """
        Get summary statistics across all intents.

        Args:
            result: Classification result

        Returns:
            Summary statistics dict
        """
        metrics = self.aggregate_buckets(result)

        # Ties go to the earlier intent in display order
        top_intent = max(
            IntentType,
            key=lambda i: metrics[i].keyword_count
        )

        return {
            "total_keywords": result.stats.total_keywords,
            "total_volume": result.stats.total_volume,
            "avg_volume": (
                result.stats.total_volume / result.stats.total_keywords
                if result.stats.total_keywords else 0
            ),
            "top_intent": top_intent.value,
            "intent_shares": {
                intent.value: round(m.share, 4)
                for intent, m in metrics.items()
            },
            "intent_volumes": {
                intent.value: m.total_volume
                for intent, m in metrics.items()
            }
        }
