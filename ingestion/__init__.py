"""
Ingestion module for the Keyword Intent Analyzer.
Handles file upload, delimited-text parsing and input normalization.
"""
from ingestion.csv_parser import CSVParser
from ingestion.validator import (
    KeywordValidator,
    NormalizationResult,
    coerce_volume,
    parse_volume_field
)

__all__ = [
    "CSVParser",
    "KeywordValidator",
    "NormalizationResult",
    "coerce_volume",
    "parse_volume_field"
]
