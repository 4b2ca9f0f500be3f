from __future__ import annotations

import pandas as pd

from .model import MarkovModel


REPORT_COLUMNS = ["window", "character", "count", "probability", "cumulative_probability"]


def model_to_frame(model: MarkovModel) -> pd.DataFrame:
    """One row per (window, next character); windows sorted, entries in insertion order."""

    rows = [
        {
            "window": window,
            "character": entry.character,
            "count": entry.count,
            "probability": entry.probability,
            "cumulative_probability": entry.cumulative_probability,
        }
        for window in sorted(model.windows())
        for entry in model.get_table(window)
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)
