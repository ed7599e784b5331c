"""
Intent classification for keywords.
Uses ordered substring rules; the first matching rule wins.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from core.exceptions import ValidationError
from core.logger import get_logger
from ingestion.validator import KeywordValidator

logger = get_logger(__name__)


class IntentType(Enum):
    """Types of search intent, in display order."""
    INFORMATIONAL = "Informational"
    TRANSACTIONAL = "Transactional"
    COMMERCIAL = "Commercial"
    NAVIGATIONAL = "Navigational"


@dataclass(frozen=True)
class KeywordRecord:
    """A classified keyword."""
    keyword: str
    volume: int
    intent: IntentType

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "keyword": self.keyword,
            "volume": self.volume,
            "intent": self.intent.value
        }


@dataclass
class SummaryStats:
    """Aggregate statistics for one classified batch."""
    total_keywords: int = 0
    total_volume: int = 0
    intent_distribution: Dict[IntentType, int] = field(
        default_factory=lambda: {intent: 0 for intent in IntentType}
    )

    @property
    def total_clusters(self) -> int:
        # Every keyword counts as its own cluster in the summary
        return self.total_keywords

    def to_dict(self) -> dict:
        """Convert to the response shape."""
        return {
            "totalKeywords": self.total_keywords,
            "totalClusters": self.total_clusters,
            "totalVolume": self.total_volume,
            "intentDistribution": {
                intent.value: self.intent_distribution.get(intent, 0)
                for intent in IntentType
            }
        }


@dataclass
class ClassificationResult:
    """Intent buckets, summary stats and all records in input order."""
    buckets: Dict[IntentType, List[KeywordRecord]]
    stats: SummaryStats
    records: List[KeywordRecord]

    def bucket(self, intent: IntentType) -> List[KeywordRecord]:
        return self.buckets.get(intent, [])

    def to_dict(self) -> dict:
        """Convert to the response shape."""
        return {
            "keywordsByIntent": {
                intent.value: [r.to_dict() for r in self.bucket(intent)]
                for intent in IntentType
            },
            "stats": self.stats.to_dict(),
            "allKeywords": [r.to_dict() for r in self.records]
        }

    def to_dataframe(self) -> pd.DataFrame:
        """All records as a DataFrame."""
        return pd.DataFrame(
            [r.to_dict() for r in self.records],
            columns=["keyword", "volume", "intent"]
        )


class KeywordClassifier:
    """
    Classifies search intent with ordered substring rules.

    Rules, checked case-insensitively in this order:
    - Commercial: "best"
    - Transactional: buy, price, purchase, order, shop, cost
    - Navigational: login, website, site, official, app, web
    - Informational: everything else

    A keyword containing both "best" and "buy" is Commercial.
    """

    INTENT_RULES: Tuple[Tuple[IntentType, Tuple[str, ...]], ...] = (
        (IntentType.COMMERCIAL, ("best",)),
        (IntentType.TRANSACTIONAL, (
            "buy", "price", "purchase", "order", "shop", "cost"
        )),
        (IntentType.NAVIGATIONAL, (
            "login", "website", "site", "official", "app", "web"
        )),
    )

    DEFAULT_INTENT = IntentType.INFORMATIONAL

    def __init__(self, validator: Optional[KeywordValidator] = None):
        self.validator = validator or KeywordValidator()

    def detect_intent(self, keyword: str) -> IntentType:
        """
        Detect intent for a single keyword.

        Args:
            keyword: Keyword to classify

        Returns:
            IntentType of the first matching rule
        """
        kw = keyword.lower().strip()

        for intent, triggers in self.INTENT_RULES:
            if any(trigger in kw for trigger in triggers):
                logger.debug(f'"{keyword}" -> {intent.value}')
                return intent

        logger.debug(f'"{keyword}" -> {self.DEFAULT_INTENT.value} (default)')
        return self.DEFAULT_INTENT

    def normalize_input(
        self,
        keywords: Sequence[str],
        volumes: Optional[Sequence[Any]] = None
    ) -> List[Tuple[str, int]]:
        """
        Pair, trim and coerce raw input.

        Raises:
            ValidationError: If no keywords remain
        """
        return self.validator.normalize_input(keywords, volumes)

    def classify(
        self,
        records: Sequence[Tuple[str, int]]
    ) -> ClassificationResult:
        """
        Classify normalized (keyword, volume) pairs into intent buckets.

        Args:
            records: Normalized pairs

        Returns:
            ClassificationResult with all four buckets present

        Raises:
            ValidationError: If records is empty
        """
        if not records:
            raise ValidationError("No keywords provided", field="keywords")

        buckets: Dict[IntentType, List[KeywordRecord]] = {
            intent: [] for intent in IntentType
        }
        classified = []

        for keyword, volume in records:
            record = KeywordRecord(
                keyword=keyword,
                volume=volume,
                intent=self.detect_intent(keyword)
            )
            buckets[record.intent].append(record)
            classified.append(record)

        stats = SummaryStats(
            total_keywords=len(classified),
            total_volume=sum(r.volume for r in classified),
            intent_distribution={
                intent: len(bucket) for intent, bucket in buckets.items()
            }
        )

        logger.info(f"Classified {stats.total_keywords} keywords")
        for intent, count in stats.intent_distribution.items():
            logger.info(f"{intent.value}: {count} keywords")

        return ClassificationResult(
            buckets=buckets,
            stats=stats,
            records=classified
        )

    def analyze(
        self,
        keywords: Sequence[str],
        volumes: Optional[Sequence[Any]] = None
    ) -> ClassificationResult:
        """Normalize raw input and classify it."""
        return self.classify(self.normalize_input(keywords, volumes))
