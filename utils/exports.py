# utils/exports.py

"""
Download payloads for the dashboard tables:
CSV, JSON (UTF-8) and Excel, plus the stacked stats table.
"""

import io
import pandas as pd

EXPORT_FORMATS = {
    "CSV": ("csv", "text/csv"),
    "JSON": ("json", "application/json"),
    "Excel": ("xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
}


def stats_to_frame(tables: dict) -> pd.DataFrame:
    """Stacks category tables into one frame with a leading 'category' column."""
    frames = []
    for category, df in tables.items():
        df_cat = df.copy()
        df_cat.columns = ["label", "value"]
        df_cat.insert(0, "category", category)
        frames.append(df_cat)
    return pd.concat(frames, ignore_index=True)


def export_bytes(df: pd.DataFrame, fmt: str) -> bytes:
    """Serializes a table in one of EXPORT_FORMATS; unknown formats raise KeyError."""
    extension, _ = EXPORT_FORMATS[fmt]

    if extension == "xlsx":
        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="xlsxwriter") as writer:
            df.to_excel(writer, sheet_name="rdap", index=False)
        return buffer.getvalue()

    if extension == "json":
        return df.to_json(orient="records", force_ascii=False).encode("utf-8")

    return df.to_csv(index=False).encode("utf-8")


def export_file_name(name: str, fmt: str) -> str:
    extension, _ = EXPORT_FORMATS[fmt]
    return f"rdap_{name}.{extension}"
