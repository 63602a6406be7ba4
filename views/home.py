# views/home.py

"""
Home dashboard page with KPIs, map, pie charts and downloads.
"""

import streamlit as st

from settings.constants import CATEGORIES, CATEGORY_LABELS, MAP_CONTAINER, chart_container
from utils.calculations import deployment_share
from utils.data import stats_tables, table_from_rows
from utils.exports import EXPORT_FORMATS, export_bytes, export_file_name, stats_to_frame
from utils.theme import prefers_dark_mode
from views.charts import render_charts


def page_containers():
    """Map container full width, then one column per category."""
    containers = {MAP_CONTAINER: st.container()}
    for category, col in zip(CATEGORIES, st.columns(len(CATEGORIES))):
        with col:
            st.subheader(CATEGORY_LABELS[category])
        containers[chart_container(category)] = col
    return containers


def render_home(map_rows, stats_rows, palette_mode):
    st.title("RDAP Deployment")

    # ---------------------------------------------------
    # KPIs
    # ---------------------------------------------------
    tables = stats_tables(stats_rows)

    for col, category in zip(st.columns(len(CATEGORIES)), CATEGORIES):
        col.metric(
            f"RDAP share · {CATEGORY_LABELS[category]}",
            f"{deployment_share(tables[category]):.1%}",
        )

    st.markdown("---")

    # ---------------------------------------------------
    # Charts
    # ---------------------------------------------------
    containers = page_containers()

    def draw(container_id, fig):
        with containers[container_id]:
            st.plotly_chart(fig, width="stretch", key=container_id)

    render_charts(
        map_rows,
        stats_rows,
        prefers_dark=prefers_dark_mode(),
        palette_mode=palette_mode,
        draw=draw,
    )

    st.markdown("---")

    # ---------------------------------------------------
    # Downloads
    # ---------------------------------------------------
    with st.expander("Download data", expanded=False):
        df_map = table_from_rows(map_rows)
        df_stats = stats_to_frame(tables)

        for name, df in (("map", df_map), ("stats", df_stats)):
            for col, fmt in zip(st.columns(len(EXPORT_FORMATS)), EXPORT_FORMATS):
                col.download_button(
                    f"{name} · {fmt}",
                    export_bytes(df, fmt),
                    file_name=export_file_name(name, fmt),
                    mime=EXPORT_FORMATS[fmt][1],
                    key=f"download-{name}-{fmt}",
                )
