"""
Metrics display components for Streamlit.
Renders summary counters and per-intent keyword tables.
"""
import streamlit as st
import pandas as pd
from typing import Dict, List

from analytics.metrics_aggregator import IntentMetrics
from labeling.intent_classifier import IntentType, KeywordRecord, SummaryStats
from visualization.view_state import ViewState, format_number

INTENT_ICONS = {
    IntentType.INFORMATIONAL: "📘",
    IntentType.TRANSACTIONAL: "🛒",
    IntentType.COMMERCIAL: "📈",
    IntentType.NAVIGATIONAL: "🧭"
}


def display_summary_metrics(stats: SummaryStats):
    """
    Display top-level summary counters.

    Args:
        stats: Summary statistics of the batch
    """
    col1, col2, col3 = st.columns(3)

    with col1:
        st.metric(
            label="Clusters",
            value=f"{stats.total_clusters:,}"
        )

    with col2:
        st.metric(
            label="Total Keywords",
            value=f"{stats.total_keywords:,}"
        )

    with col3:
        st.metric(
            label="Total Volume",
            value=format_number(stats.total_volume)
        )


def display_intent_distribution(
    stats: SummaryStats,
    view_state: ViewState
):
    """
    Display one clickable card per intent with its keyword count.

    Clicking a card focuses the view on that intent.

    Args:
        stats: Summary statistics of the batch
        view_state: Results view state to update
    """
    st.markdown("### Intent Distribution")

    columns = st.columns(len(IntentType))

    for column, intent in zip(columns, IntentType):
        count = stats.intent_distribution.get(intent, 0)
        with column:
            st.metric(
                label=f"{INTENT_ICONS[intent]} {intent.value}",
                value=count
            )
            if st.button(
                "View",
                key=f"intent_card_{intent.name}",
                type=(
                    "primary"
                    if view_state.active_intent == intent
                    else "secondary"
                )
            ):
                view_state.select(intent)
                st.rerun()


def display_intent_section(
    intent: IntentType,
    records: List[KeywordRecord],
    metrics: IntentMetrics,
    view_state: ViewState,
    preview_count: int = 3
):
    """
    Display an overview section for one intent with a keyword preview.

    Args:
        intent: Intent of the section
        records: Keywords in the bucket
        metrics: Aggregated bucket metrics
        view_state: Results view state to update
        preview_count: Keywords shown before "more"
    """
    with st.container(border=True):
        st.markdown(f"#### {INTENT_ICONS[intent]} {intent.value}")
        st.caption(
            f"{metrics.keyword_count} keywords · "
            f"{format_number(metrics.total_volume)} volume"
        )

        for record in records[:preview_count]:
            st.markdown(f"• {record.keyword} ({record.volume})")

        if len(records) > preview_count:
            st.markdown(
                f"*+ {len(records) - preview_count} more keywords*"
            )

        if st.button("View All →", key=f"view_all_{intent.name}"):
            view_state.select(intent)
            st.rerun()


def display_all_intents(
    buckets: Dict[IntentType, List[KeywordRecord]],
    metrics: Dict[IntentType, IntentMetrics],
    stats: SummaryStats,
    view_state: ViewState,
    preview_count: int = 3
):
    """
    Display every non-empty intent section.

    Args:
        buckets: Records per intent
        metrics: Aggregated metrics per intent
        stats: Summary statistics of the batch
        view_state: Results view state
        preview_count: Keywords shown per section
    """
    st.markdown("### Keyword Analysis Results")
    st.caption(
        f"{stats.total_keywords} total keywords · "
        f"{format_number(stats.total_volume)} total volume"
    )
    st.info("Select an intent to view its keywords")

    shown = 0
    for intent in IntentType:
        records = buckets.get(intent, [])
        if records:
            display_intent_section(
                intent,
                records,
                metrics[intent],
                view_state,
                preview_count
            )
            shown += 1

    if shown == 0:
        st.warning("No Data Available. Analyze some keywords to see results.")


def display_intent_table(
    intent: IntentType,
    records: List[KeywordRecord],
    metrics: IntentMetrics,
    view_state: ViewState,
    height: int = 400
):
    """
    Display the full keyword table for one intent.

    Args:
        intent: Intent being shown
        records: Keywords in the bucket
        metrics: Aggregated bucket metrics
        view_state: Results view state to update
        height: Table height in pixels
    """
    if st.button("← Back to All", key="back_to_all"):
        view_state.reset()
        st.rerun()

    st.markdown(f"### {INTENT_ICONS[intent]} {intent.value} Keywords")

    if not records:
        st.markdown(f"#### No {intent.value} Keywords Found")
        st.caption("This intent type is not present in your keyword list.")
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Keywords", metrics.keyword_count)
    with col2:
        st.metric("Total Volume", format_number(metrics.total_volume))
    with col3:
        st.metric("Avg", format_number(metrics.avg_volume))

    df = pd.DataFrame([
        {
            "S.N.": index,
            "Keywords": record.keyword,
            "Volume": record.volume
        }
        for index, record in enumerate(records, start=1)
    ])

    st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        height=height
    )
