"""Small multiples: one panel per category level, or independent panels side by side."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .charts import figure
from .data import levels
from .style import DEFAULT_THEME, Theme


def _grid(n: int, ncols: int | None) -> tuple[int, int]:
    if n < 1:
        raise ValueError("Need at least one panel")
    ncols = min(ncols or n, n)
    return math.ceil(n / ncols), ncols


def facet(
    frame: pd.DataFrame,
    by: str,
    draw: Callable[[plt.Axes, pd.DataFrame, Any], None],
    *,
    theme: Theme = DEFAULT_THEME,
    ncols: int | None = None,
    sharex: bool = True,
    sharey: bool = True,
    title: str | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, np.ndarray]:
    """Draw one panel per level of column ``by``.

    ``draw(ax, subframe, level)`` fills each panel; it runs inside the
    theme's context. Empty levels still get a panel so facets line up with
    other charts of the same column. Grid cells past the last level are
    hidden.
    """
    panel_levels = levels(frame[by])
    nrows, ncols = _grid(len(panel_levels), ncols)
    fig, axes = figure(
        theme, figsize=figsize, nrows=nrows, ncols=ncols,
        sharex=sharex, sharey=sharey, squeeze=False,
    )
    flat = axes.ravel()
    with theme.context():
        for ax, level in zip(flat, panel_levels):
            draw(ax, frame[frame[by] == level], level)
            ax.set_title(str(level))
        for ax in flat[len(panel_levels):]:
            ax.set_visible(False)
        if title:
            fig.suptitle(title)
        fig.tight_layout()
    return fig, axes


def side_by_side(
    draws: Sequence[Callable[[plt.Axes], None]],
    *,
    theme: Theme = DEFAULT_THEME,
    titles: Sequence[str] | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, np.ndarray]:
    """Compose independent panels in one row, each drawn by ``draws[i](ax)``."""
    if titles is not None and len(titles) != len(draws):
        raise ValueError(f"{len(draws)} panels but {len(titles)} titles")
    nrows, ncols = _grid(len(draws), None)
    fig, axes = figure(theme, figsize=figsize, nrows=nrows, ncols=ncols, squeeze=False)
    flat = axes.ravel()
    with theme.context():
        for i, (ax, draw) in enumerate(zip(flat, draws)):
            draw(ax)
            if titles is not None:
                ax.set_title(titles[i])
        fig.tight_layout()
    return fig, axes
