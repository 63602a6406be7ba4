# utils/calculations.py

"""
Calculation utilities:
- RDAP deployment share per category
- region codes and location mode for the world map
"""

import pandas as pd
import pycountry

from utils.log import get_logger

logger = get_logger(__name__)

# ccTLDs whose code differs from the ISO 3166-1 alpha-2 code
CCTLD_ALIASES = {
    "UK": "GB",
    "AC": "SH",
}


def deployment_share(df: pd.DataFrame) -> float:
    """
    Share of the first slice over both slices of a category table.
    Returns 0.0 when both slices are zero.
    """
    values = pd.to_numeric(df.iloc[:2, 1])
    total = values.sum()
    if total == 0:
        return 0.0
    return float(values.iloc[0] / total)


def alpha2_to_alpha3(code: str) -> str:
    """ccTLD or alpha-2 code to ISO-3. Unknown codes are returned upper-cased."""
    code = code.strip().upper()
    country = pycountry.countries.get(alpha_2=CCTLD_ALIASES.get(code, code))
    if country is None:
        logger.warning("No ISO-3 code for region %s", code)
        return code
    return country.alpha_3


def normalize_regions(regions: pd.Series) -> pd.Series:
    """Two-letter codes (ccTLD style, any case) become ISO-3, anything else is kept."""
    codes = regions.astype(str).str.strip()
    if not codes.empty and codes.str.fullmatch(r"[A-Za-z]{2}").all():
        return codes.map(alpha2_to_alpha3)
    return codes


def infer_location_mode(regions: pd.Series) -> str:
    """ISO-3 when every region is a 3-letter upper-case code, country names otherwise."""
    codes = regions.astype(str)
    if not codes.empty and codes.str.fullmatch(r"[A-Z]{3}").all():
        return "ISO-3"
    return "country names"
