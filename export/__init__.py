"""
Export module for the Keyword Intent Analyzer.

Provides CSV and text report export.
"""
from export.csv_exporter import CSVExporter, create_download_link

__all__ = [
    "CSVExporter",
    "create_download_link",
]
