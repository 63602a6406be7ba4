# views/charts.py

"""
Chart rendering for the dashboard.
One world map and one pie chart per category, all drawn with the same
two-color palette resolved at the start of each render.
"""

import plotly.graph_objects as go
import plotly.io as pio
import streamlit as st

from settings.constants import (
    CATEGORIES,
    MAP_CONTAINER,
    MAP_TITLE,
    PIE_SLICE_TEXT,
    TRANSPARENT,
    chart_container,
)
from settings.palettes import Palette
from utils.calculations import infer_location_mode, normalize_regions
from utils.data import table_from_rows
from utils.log import get_logger
from utils.theme import get_palette_strategy

logger = get_logger(__name__)

TEMPLATE_NAME = "rdap_transparent"


# --------------------------------------------------------
# LIBRARY SETUP
# --------------------------------------------------------
def configure_plotly():
    """
    Registers the dashboard template and makes it the default.
    Must run before the first render.
    """
    pio.templates[TEMPLATE_NAME] = go.layout.Template(
        layout=go.Layout(
            paper_bgcolor=TRANSPARENT,
            plot_bgcolor=TRANSPARENT,
            margin=dict(l=10, r=10, t=50, b=10),
        )
    )
    pio.templates.default = f"plotly+{TEMPLATE_NAME}"
    logger.info("Plotly template %s registered", TEMPLATE_NAME)
    return TEMPLATE_NAME


# --------------------------------------------------------
# GEO CHART: RDAP deployment per region
# --------------------------------------------------------
def chart_world_map(df, palette: Palette):
    regions = normalize_regions(df.iloc[:, 0])
    values = df.iloc[:, 1]

    fig = go.Figure(
        go.Choropleth(
            locations=regions,
            z=values,
            locationmode=infer_location_mode(regions),
            colorscale=[[0.0, palette.primary], [1.0, palette.secondary]],
            showscale=False,
            marker_line_color=palette.primary,
        )
    )

    fig.update_layout(
        title=MAP_TITLE,
        showlegend=False,
        paper_bgcolor=TRANSPARENT,
        plot_bgcolor=TRANSPARENT,
        geo=dict(bgcolor=TRANSPARENT, showframe=False),
    )

    return fig


# --------------------------------------------------------
# PIE CHART: two slices per category
# --------------------------------------------------------
def chart_category_pie(df, palette: Palette):
    fig = go.Figure(
        go.Pie(
            labels=df.iloc[:, 0],
            values=df.iloc[:, 1],
            sort=False,
            direction="clockwise",
            textinfo=PIE_SLICE_TEXT,
            marker=dict(colors=[palette.primary, palette.secondary]),
        )
    )

    fig.update_layout(
        showlegend=False,
        paper_bgcolor=TRANSPARENT,
        plot_bgcolor=TRANSPARENT,
    )

    return fig


# --------------------------------------------------------
# RENDER
# --------------------------------------------------------
def draw_plotly_chart(container_id: str, fig) -> None:
    st.plotly_chart(fig, width="stretch", key=container_id)


def render_charts(map_data, stats_data, prefers_dark=None, palette_mode="theme", draw=None):
    """
    Draws the world map, then the pie charts in CATEGORIES order.

    map_data and each stats_data[category] are header + rows tables.
    draw(container_id, fig) places a figure; defaults to the Streamlit page.
    Errors from the tables, a missing category or a missing container propagate.
    """
    if draw is None:
        draw = draw_plotly_chart

    palette = get_palette_strategy(palette_mode)(prefers_dark)
    logger.debug("Palette %s (mode=%s, prefers_dark=%s)", palette, palette_mode, prefers_dark)

    draw(MAP_CONTAINER, chart_world_map(table_from_rows(map_data), palette))

    for category in CATEGORIES:
        fig = chart_category_pie(table_from_rows(stats_data[category]), palette)
        logger.debug("Drawing %s", chart_container(category))
        draw(chart_container(category), fig)
