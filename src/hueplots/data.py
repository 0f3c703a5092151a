"""Loading a small table and turning its grouping columns into categories."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def as_category(series: pd.Series, levels: Sequence) -> pd.Series:
    """Convert ``series`` to an ordered categorical with ``levels``.

    Non-missing values outside ``levels`` raise ``ValueError`` instead of
    quietly becoming NaN.
    """
    levels = list(levels)
    unknown = set(series.dropna().unique()) - set(levels)
    if unknown:
        raise ValueError(
            f"Column {series.name!r} has values outside {levels}: {sorted(map(str, unknown))}"
        )
    return pd.Series(
        pd.Categorical(series, categories=levels, ordered=True),
        index=series.index,
        name=series.name,
    )


def load_table(
    path: str | Path,
    categories: Mapping[str, Sequence] | None = None,
) -> pd.DataFrame:
    """Read a CSV file; columns named in ``categories`` become ordered categoricals."""
    frame = pd.read_csv(path)
    for column, column_levels in (categories or {}).items():
        if column not in frame.columns:
            raise KeyError(f"{path}: no column {column!r}")
        frame[column] = as_category(frame[column], column_levels)
    logger.info(f"Loaded {len(frame)} rows from {path}")
    return frame


def levels(series: pd.Series) -> list:
    """Category levels of ``series``, or its sorted distinct values."""
    if isinstance(series.dtype, pd.CategoricalDtype):
        return list(series.cat.categories)
    return sorted(series.dropna().unique())


def cut_ages(series: pd.Series, bins: Sequence[float], labels: Sequence[str]) -> pd.Series:
    """Bin numeric values into ordered categories, right-exclusive.

    ``bins`` are the edges, so ``len(bins) == len(labels) + 1``.
    """
    if len(bins) != len(labels) + 1:
        raise ValueError(f"{len(labels)} labels need {len(labels) + 1} bin edges, got {len(bins)}")
    return pd.cut(series, bins=list(bins), labels=list(labels), right=False, ordered=True)


def counts(frame: pd.DataFrame, x: str, hue: str | None = None) -> pd.DataFrame:
    """Row counts per ``x`` level, split into one column per ``hue`` level.

    Levels that never occur are kept with a count of zero so every chart
    built from the same column sees the same categories.
    """
    x_levels = levels(frame[x])
    if hue is None:
        table = frame.groupby(x, observed=False).size().reindex(x_levels, fill_value=0)
        return table.to_frame("count")

    hue_levels = levels(frame[hue])
    table = pd.crosstab(frame[x], frame[hue], dropna=False)
    return table.reindex(index=x_levels, columns=hue_levels, fill_value=0)
