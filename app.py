"""
Keyword Intent Analyzer

A Streamlit app for keyword search-intent analysis with:
- CSV/TXT upload or typed keyword input
- Rule-based intent classification
- Per-intent keyword tables and volume statistics
- CSV and text report export
"""
import streamlit as st

# Page config must be first
st.set_page_config(
    page_title="Keyword Intent Analyzer",
    page_icon="🔑",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Imports
from config.settings import get_settings
from core.exceptions import ConfigurationError, ValidationError
from core.keyword_service import KeywordAnalysisService
from core.logger import setup_logger
from analytics.metrics_aggregator import MetricsAggregator
from export.csv_exporter import CSVExporter, create_download_link
from ingestion.csv_parser import CSVParser
from visualization.charts import (
    create_intent_breakdown,
    create_volume_by_intent
)
from visualization.metrics_display import (
    display_summary_metrics,
    display_intent_distribution,
    display_all_intents,
    display_intent_table
)
from visualization.view_state import ViewState

setup_logger()


def init_session_state():
    """Initialize session state variables."""
    defaults = {
        "result": None,
        "clusters": None,
        "view_state": ViewState(),
        "error": None
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def render_sidebar() -> dict:
    """Render sidebar with options and help."""
    settings = get_settings()

    st.sidebar.title("🔑 Keyword Intent Analyzer")
    st.sidebar.caption(f"v{settings.app_version}")

    st.sidebar.markdown("---")
    st.sidebar.markdown("### Options")

    show_clusters = st.sidebar.checkbox(
        "Show placeholder clusters",
        value=False,
        help=(
            "Groups keywords in pairs by input order with mock similarity "
            "values. For testing the layout only."
        )
    )

    st.sidebar.markdown("---")

    with st.sidebar.expander("❓ Help"):
        st.markdown(
            "**Input format:** one `keyword[,volume]` per line.\n\n"
            "**Intent rules** (first match wins):\n"
            "1. *best* → Commercial\n"
            "2. *buy, price, purchase, order, shop, cost* → Transactional\n"
            "3. *login, website, site, official, app, web* → Navigational\n"
            "4. anything else → Informational\n\n"
            "In uploaded files, a first line containing *keyword* is "
            "treated as a header, and rows whose keyword is a number are "
            "skipped."
        )

    return {"show_clusters": show_clusters}


def store_response(service: KeywordAnalysisService, response: dict):
    """Keep a successful response in session state."""
    if not response["success"]:
        st.session_state.error = response["error"]
        return

    st.session_state.error = None
    st.session_state.view_state.reset()
    st.session_state.result = service.last_result
    st.session_state.clusters = response.get("clusters")


def render_upload_tab(service: KeywordAnalysisService, config: dict):
    """Render file upload input."""
    settings = get_settings()

    uploaded_file = st.file_uploader(
        "Upload CSV or TXT file with keywords",
        type=[ext.lstrip(".") for ext in settings.ingestion.allowed_extensions],
        help="Each line: keyword[,volume]. A header line is detected."
    )

    if uploaded_file is None:
        return

    content = uploaded_file.getvalue()

    try:
        text = CSVParser().read_upload(content, uploaded_file.name)
    except ValidationError as e:
        st.error(e.message)
        return

    st.success(
        f"📄 **{uploaded_file.name}** · "
        f"{CSVParser.count_keywords(text):,} keywords"
    )

    if st.button("🚀 Process File", type="primary"):
        with st.spinner("Processing file..."):
            response = service.process_csv(
                content,
                uploaded_file.name,
                include_clusters=config["show_clusters"]
            )
        store_response(service, response)
        st.rerun()


def render_manual_tab(service: KeywordAnalysisService, config: dict):
    """Render typed keyword input."""
    text = st.text_area(
        "Enter keywords, one per line (optionally `keyword,volume`)",
        height=250,
        placeholder="best running shoes,300\nbuy nike shoes,500\nnike official site"
    )

    lines = [line for line in text.split("\n") if line.strip()]
    st.caption(f"{len(lines)} keywords")

    if st.button("🔍 Analyze Keywords", type="primary"):
        if not text.strip():
            st.error("Please enter some keywords first.")
            return

        with st.spinner("Analyzing keywords..."):
            response = service.process_text(
                text,
                include_clusters=config["show_clusters"]
            )
        store_response(service, response)
        st.rerun()


def render_results(result, view_state: ViewState):
    """Render classification results."""
    settings = get_settings()
    aggregator = MetricsAggregator()
    metrics = aggregator.aggregate_buckets(result)

    display_summary_metrics(result.stats)
    display_intent_distribution(result.stats, view_state)

    st.markdown("---")

    tab1, tab2, tab3, tab4 = st.tabs([
        "📋 Keywords",
        "📈 Charts",
        "🧪 Clusters",
        "📥 Export"
    ])

    with tab1:
        if view_state.showing_all:
            display_all_intents(
                result.buckets,
                metrics,
                result.stats,
                view_state,
                settings.display.preview_count
            )
        else:
            intent = view_state.active_intent
            display_intent_table(
                intent,
                result.bucket(intent),
                metrics[intent],
                view_state,
                settings.display.table_height
            )

    with tab2:
        col1, col2 = st.columns(2)
        with col1:
            fig = create_intent_breakdown(result.stats.intent_distribution)
            st.plotly_chart(fig, use_container_width=True)
        with col2:
            fig = create_volume_by_intent(metrics)
            st.plotly_chart(fig, use_container_width=True)

    with tab3:
        clusters = st.session_state.clusters
        if clusters:
            st.caption(
                "Placeholder grouping: keywords are paired by input order "
                "and similarity values are mock data."
            )
            st.dataframe(clusters, use_container_width=True)
        else:
            st.info("Enable placeholder clusters in the sidebar to view.")

    with tab4:
        exporter = CSVExporter()

        col1, col2 = st.columns(2)
        with col1:
            csv_content = exporter.export_keywords(result)
            st.download_button(
                label="📄 Download CSV",
                data=create_download_link(csv_content),
                file_name=exporter.default_filename(),
                mime="text/csv"
            )
        with col2:
            report = exporter.export_text_report(result)
            st.download_button(
                label="📋 Download Text Report",
                data=report,
                file_name="keyword-report.txt",
                mime="text/plain"
            )

        with st.expander("Report preview"):
            st.code(report, language=None)


def main():
    """Main application entry point."""
    init_session_state()

    try:
        get_settings().validate()
    except ConfigurationError as e:
        st.error(f"Configuration error: {e.message}")
        st.stop()

    config = render_sidebar()
    service = KeywordAnalysisService()

    st.title("🔑 Keyword Intent Analyzer")
    st.markdown(
        "Classify keywords by search intent and review volume by intent."
    )

    upload_tab, manual_tab = st.tabs(["📤 Upload File", "⌨️ Type Keywords"])

    with upload_tab:
        render_upload_tab(service, config)

    with manual_tab:
        render_manual_tab(service, config)

    if st.session_state.error:
        st.error(st.session_state.error)

    if st.session_state.result is not None:
        st.markdown("---")
        render_results(
            st.session_state.result,
            st.session_state.view_state
        )

        if st.button("🔄 Start New Analysis"):
            for key in list(st.session_state.keys()):
                del st.session_state[key]
            st.rerun()


if __name__ == "__main__":
    main()
