"""
Labeling module for the Keyword Intent Analyzer.

Assigns each keyword one of four search intents and groups the results
into intent buckets.
"""
from labeling.intent_classifier import (
    KeywordClassifier,
    IntentType,
    KeywordRecord,
    SummaryStats,
    ClassificationResult
)

__all__ = [
    "KeywordClassifier",
    "IntentType",
    "KeywordRecord",
    "SummaryStats",
    "ClassificationResult",
]
