"""Load the converted yield curve CSV for analysis."""

from datetime import date
from pathlib import Path

import pandas as pd

from ustreasury_yield_curve.config import CSV_COLUMNS, MATURITIES


def load_yield_curve(
    path: Path, start_date: date | None = None, end_date: date | None = None
) -> pd.DataFrame:
    """
    Read a converted yieldcurverates.csv file.

    Args:
        path: CSV written by the converter
        start_date: Drop observations before this date
        end_date: Drop observations after this date

    Returns:
        DataFrame with DatetimeIndex named 'date' and one float column per
        maturity (1mo ... 30yr). Unpublished rates are NaN.
    """
    if Path(path).stat().st_size == 0:
        df = pd.DataFrame(columns=list(MATURITIES.values()), dtype=float)
        df.index = pd.DatetimeIndex([], name="date")
        return df

    df = pd.read_csv(
        path,
        header=None,
        names=CSV_COLUMNS,
        dtype={"date": str},
    )
    df["date"] = pd.to_datetime(df["date"], format="%Y%m%d")
    df.set_index("date", inplace=True)
    df = df.astype(float)

    if start_date:
        df = df[df.index >= pd.Timestamp(start_date)]
    if end_date:
        df = df[df.index <= pd.Timestamp(end_date)]

    return df
