# settings/constants.py

"""
Global constants used across the RDAP Deployment Dashboard.
This module contains static values and configuration shared across modules.
"""

import os

# ---------------------------------------------------
# Application metadata
# ---------------------------------------------------
APP_TITLE = "RDAP Deployment Dashboard"
APP_VERSION = "1.0"

# ---------------------------------------------------
# Environment configuration
# ---------------------------------------------------
# Read ONCE here, so app/app.py and the views can import them.
DATA_PATH = os.environ.get("RDAP_DASHBOARD_DATA", "data/dashboard.json")
PALETTE_MODE = os.environ.get("RDAP_DASHBOARD_PALETTE", "theme")
LOG_LEVEL = os.environ.get("RDAP_DASHBOARD_LOG_LEVEL", "INFO")

# ---------------------------------------------------
# Categories (rendered as pie charts, in this order)
# ---------------------------------------------------
CATEGORIES = ("all", "generic", "country-code")

CATEGORY_LABELS = {
    "all": "All TLDs",
    "generic": "Generic TLDs",
    "country-code": "Country-code TLDs",
}

# ---------------------------------------------------
# Chart containers
# ---------------------------------------------------
MAP_CONTAINER = "world-map"


def chart_container(category: str) -> str:
    """Container id of the pie chart for a category."""
    return f"{category}-chart"


# ---------------------------------------------------
# Chart configuration
# ---------------------------------------------------
MAP_TITLE = "Deployment of RDAP among ccTLDs"
TRANSPARENT = "rgba(0,0,0,0)"
PIE_SLICE_TEXT = "label"
