"""
Visualization module for the Keyword Intent Analyzer.

Provides interactive charts, metrics displays and view state.
"""
from visualization.charts import (
    create_intent_breakdown,
    create_volume_by_intent
)
from visualization.metrics_display import (
    display_summary_metrics,
    display_intent_distribution,
    display_intent_section,
    display_all_intents,
    display_intent_table
)
from visualization.view_state import ViewState, format_number

__all__ = [
    # Charts
    "create_intent_breakdown",
    "create_volume_by_intent",
    # Metrics display
    "display_summary_metrics",
    "display_intent_distribution",
    "display_intent_section",
    "display_all_intents",
    "display_intent_table",
    # View state
    "ViewState",
    "format_number",
]
