"""
Chart generation for intent results.
Uses Plotly for interactive charts.
"""
from typing import Dict

import plotly.graph_objects as go

from analytics.metrics_aggregator import IntentMetrics
from labeling.intent_classifier import IntentType

INTENT_COLORS = {
    IntentType.INFORMATIONAL: "#3498db",
    IntentType.TRANSACTIONAL: "#e74c3c",
    IntentType.COMMERCIAL: "#2ecc71",
    IntentType.NAVIGATIONAL: "#f39c12"
}


def create_intent_breakdown(
    intent_counts: Dict[IntentType, int]
) -> go.Figure:
    """
    Create pie chart of search intent distribution.

    Args:
        intent_counts: Mapping of intent type to keyword count

    Returns:
        Plotly figure
    """
    intents = [i for i in IntentType if intent_counts.get(i, 0) > 0]

    fig = go.Figure(go.Pie(
        labels=[i.value for i in intents],
        values=[intent_counts[i] for i in intents],
        marker=dict(colors=[INTENT_COLORS[i] for i in intents]),
        hole=0.4,
        sort=False,
        textinfo="label+percent",
        hovertemplate="%{label}: %{value:,} keywords<extra></extra>"
    ))

    fig.update_layout(
        title="Keyword Intent Distribution",
        template="plotly_white",
        height=400
    )

    return fig


def create_volume_by_intent(
    metrics: Dict[IntentType, IntentMetrics]
) -> go.Figure:
    """
    Create bar chart of total search volume per intent.

    Args:
        metrics: Mapping of intent type to aggregated metrics

    Returns:
        Plotly figure
    """
    intents = list(IntentType)

    fig = go.Figure(go.Bar(
        x=[i.value for i in intents],
        y=[metrics[i].total_volume for i in intents],
        marker_color=[INTENT_COLORS[i] for i in intents],
        customdata=[
            [metrics[i].keyword_count, metrics[i].avg_volume]
            for i in intents
        ],
        hovertemplate=(
            "%{x}<br>Volume: %{y:,}<br>"
            "Keywords: %{customdata[0]}<br>"
            "Avg: %{customdata[1]:,}<extra></extra>"
        )
    ))

    fig.update_layout(
        title="Search Volume by Intent",
        xaxis_title="Intent",
        yaxis_title="Total Volume",
        template="plotly_white",
        height=400
    )

    return fig
