import re
from datetime import datetime
from typing import List, Optional
import numpy as np
import pandas as pd

DEFAULT_GROWTH_RATE = 0.02
SERIES_YEARS = 7


def parse_growth_rate(text) -> float:
    """'3.1%' -> 0.031. Falls back to the default when nothing usable is stored."""
    if text is None:
        return DEFAULT_GROWTH_RATE
    match = re.search(r'-?\d+(?:\.\d+)?', str(text))
    if not match:
        return DEFAULT_GROWTH_RATE
    rate = float(match.group()) / 100
    return rate if rate > -1 else DEFAULT_GROWTH_RATE


def derive_gdp_series(gdp: float, growth_rate: float, end_year: int, years: int = SERIES_YEARS) -> List[dict]:
    """Walk the current GDP back in time at a constant growth rate."""
    offsets = np.arange(years - 1, -1, -1)
    values = gdp / np.power(1 + growth_rate, offsets)
    return [
        {"year": str(end_year - int(offset)), "gdp": round(float(value), 2)}
        for offset, value in zip(offsets, values)
    ]


def sort_gdp_history(history: List[dict]) -> List[dict]:
    df = pd.DataFrame(history, columns=['year', 'gdp'])
    df['order'] = pd.to_numeric(df['year'], errors='coerce')
    df = df.sort_values('order', kind='stable')
    return [
        {"year": str(year), "gdp": None if pd.isna(gdp) else float(gdp)}
        for year, gdp in zip(df['year'], df['gdp'])
    ]


def gdp_series(economic_data, end_year: Optional[int] = None) -> dict:
    end_year = end_year or datetime.now().year
    if economic_data.gdp_history:
        return {"source": "stored", "points": sort_gdp_history(economic_data.gdp_history)}
    if economic_data.gdp:
        growth_rate = parse_growth_rate(economic_data.gdp_growth)
        return {"source": "derived", "points": derive_gdp_series(economic_data.gdp, growth_rate, end_year)}
    return {"source": "empty", "points": []}
