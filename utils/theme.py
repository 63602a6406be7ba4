# utils/theme.py

"""
Palette resolution:
- dark-mode preference signal reported by Streamlit
- preference-driven and static palette strategies
"""

from typing import Callable, Optional

import streamlit as st

from settings.palettes import DARK_PALETTE, LIGHT_PALETTE, STATIC_PALETTE, Palette
from utils.log import get_logger

logger = get_logger(__name__)

PaletteStrategy = Callable[[Optional[bool]], Palette]


def prefers_dark_mode() -> Optional[bool]:
    """
    Returns True/False when the viewer's theme is known, None otherwise.
    The browser-reported theme wins over the configured base theme.
    """
    theme = getattr(st.context, "theme", None)
    theme_type = getattr(theme, "type", None)
    if theme_type is None:
        theme_type = st.get_option("theme.base")

    if theme_type is None:
        return None
    return theme_type == "dark"


def resolve_palette(prefers_dark: Optional[bool]) -> Palette:
    """Dark pair only when dark is explicitly preferred."""
    if prefers_dark is True:
        return DARK_PALETTE
    return LIGHT_PALETTE


def static_palette(prefers_dark: Optional[bool]) -> Palette:
    return STATIC_PALETTE


_STRATEGIES = {
    "theme": resolve_palette,
    "static": static_palette,
}


def get_palette_strategy(mode: str) -> PaletteStrategy:
    try:
        return _STRATEGIES[mode]
    except KeyError:
        raise ValueError(
            f"Unknown palette mode {mode!r}, expected one of {sorted(_STRATEGIES)}"
        ) from None
