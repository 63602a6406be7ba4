# app.py

"""
Main application entry point.
Contains:
- page layout config
- sidebar with the palette mode
- dataset load
- page dispatch to the views/ modules
"""

import streamlit as st

from settings.constants import APP_TITLE, DATA_PATH, PALETTE_MODE
from settings.palettes import PALETTE_MODES
from utils.data import load_dashboard_data
from utils.log import get_logger
from utils.theme import get_palette_strategy
from views.charts import configure_plotly
from views.home import render_home

logger = get_logger(__name__)


# ------------------------------------------------------------
# INITIAL STREAMLIT CONFIG
# ------------------------------------------------------------
st.set_page_config(
    page_title=APP_TITLE,
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def chart_library():
    return configure_plotly()


@st.cache_data
def dashboard_data(path):
    return load_dashboard_data(path)


# ------------------------------------------------------------
# MAIN
# ------------------------------------------------------------
def main():
    chart_library()
    get_palette_strategy(PALETTE_MODE)

    # Sidebar
    st.sidebar.title("Display")
    palette_mode = st.sidebar.radio(
        "Palette",
        PALETTE_MODES,
        index=PALETTE_MODES.index(PALETTE_MODE),
        format_func=lambda m: "Follow theme" if m == "theme" else "Static",
    )

    try:
        map_rows, stats_rows = dashboard_data(DATA_PATH)
    except FileNotFoundError:
        logger.error("Dashboard data not found at %s", DATA_PATH)
        st.error(f"❌ Dashboard data not found: {DATA_PATH}")
        st.stop()

    render_home(map_rows, stats_rows, palette_mode)


# ------------------------------------------------------------
# ENTRY POINT
# ------------------------------------------------------------
if __name__ == "__main__":
    main()
