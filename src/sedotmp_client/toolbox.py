from typing import Any, Dict, List
import pandas as pd
import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def report_to_dataframe(
    records: List[Dict[str, Any]]
) -> pd.DataFrame:
    """
    Convert decoded report records into a cleaned pandas DataFrame.

    The input is the list returned by `Platform.get_campaign_report` or
    `Platform.get_keyword_performance_report`, one mapping per NDJSON line.

    The function:
    1. Loads the records into a DataFrame.
    2. Renames camelCase columns to snake_case
       (e.g. `estimatedRevenue` -> `estimated_revenue`).
    3. Parses a `date` column, when present, into datetime64.
    4. Coerces object columns holding only numeric strings to numbers.

    Parameters
    ----------
    records : list of dict
        Report records as decoded from the API.

    Returns
    -------
    pandas.DataFrame
        One row per record. An empty input yields an empty DataFrame.

    Raises
    ------
    ValueError
        If a `date` column cannot be parsed.
    """
    df = pd.DataFrame(records)
    if df.empty:
        return df

    df = df.rename(columns={c: _to_snake_case(str(c)) for c in df.columns})

    if "date" in df.columns:
        df["date"] = pd.to_datetime(df["date"])

    for col in df.columns:
        values = df[col].dropna()
        if values.empty or not all(isinstance(v, str) for v in values):
            continue
        converted = pd.to_numeric(df[col], errors="coerce")
        # Only keep the conversion when no value was lost
        if converted.notna().sum() == df[col].notna().sum():
            df[col] = converted

    return df
