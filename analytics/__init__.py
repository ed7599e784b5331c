"""
Analytics module for the Keyword Intent Analyzer.
"""
from analytics.metrics_aggregator import MetricsAggregator, IntentMetrics

__all__ = ["MetricsAggregator", "IntentMetrics"]
