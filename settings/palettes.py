# settings/palettes.py

"""
Color palettes used across the map and pie charts.
Every render uses exactly one of these pairs for all four charts.
"""

from typing import NamedTuple


class Palette(NamedTuple):
    primary: str
    secondary: str


# Light display / no preference reported
LIGHT_PALETTE = Palette(
    primary="#EEEEEE",    # light gray
    secondary="#008800",  # saturated green
)

# Dark display preferred
DARK_PALETTE = Palette(
    primary="#666666",    # muted gray
    secondary="#339933",  # muted green
)

# Used when theme detection is switched off
STATIC_PALETTE = LIGHT_PALETTE

PALETTE_MODES = ("theme", "static")
