"""Convenience chart functions: line(), bar(), scatter(), count_bar(), figure(), save()."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Patch
from numpy.typing import ArrayLike

from .binding import CategoryColorBinding
from .data import counts
from .style import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

# Default output directory when HUEPLOTS_CHARTS_DIR is unset
_CHARTS_DIR = "charts"


def figure(
    theme: Theme = DEFAULT_THEME,
    figsize: tuple[float, float] | None = None,
    nrows: int = 1,
    ncols: int = 1,
    **kwargs: Any,
) -> tuple[plt.Figure, Any]:
    """Create a themed (fig, ax) pair. Escape hatch for custom charts.

    With ``nrows``/``ncols`` above one, ``ax`` is the array of axes.
    """
    with theme.context():
        fig, ax = plt.subplots(nrows, ncols, figsize=figsize, **kwargs)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Save a figure to ``$HUEPLOTS_CHARTS_DIR`` (or a custom directory).

    Returns the path to the saved file.
    """
    dest = Path(output_dir or os.environ.get("HUEPLOTS_CHARTS_DIR", _CHARTS_DIR))
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    with theme.context():
        fig.savefig(path)
    plt.close(fig)
    logger.info(f"Saved chart to {path}")
    return path


def legend(
    ax: plt.Axes,
    binding: CategoryColorBinding,
    labels: ArrayLike | None = None,
    title: str | None = None,
    **kwargs: Any,
):
    """Legend listing ``labels`` (default: every bound label) with their colors."""
    labels = binding.labels if labels is None else list(labels)
    handles = [
        Patch(facecolor=color, edgecolor="none", label=str(label))
        for label, color in zip(labels, binding.resolve(labels))
    ]
    return ax.legend(handles=handles, title=title, **kwargs)


def _decorate(
    ax: plt.Axes,
    title: str | None,
    xlabel: str | None,
    ylabel: str | None,
) -> None:
    if title:
        ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)


def _finish(fig, filename, output_dir, theme) -> None:
    if filename:
        save(fig, filename, output_dir, theme=theme)


def _series_colors(
    names: list,
    binding: CategoryColorBinding | None,
    theme: Theme,
    color=None,
) -> list:
    """One color per named series.

    Bound colors win; otherwise a caller-supplied ``color`` for every series,
    else the theme cycle.
    """
    if binding is not None:
        return binding.resolve(names)
    if color is not None:
        return [color] * len(names)
    palette = theme.palette
    return [palette[i % len(palette)] for i in range(len(names))]


def line(
    x: ArrayLike,
    y: ArrayLike | dict[str, ArrayLike],
    *,
    binding: CategoryColorBinding | None = None,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Line chart. Pass a dict of {label: y_values} for multiple lines.

    A caller-supplied ``color`` is used only when there is no binding.
    """
    color = kwargs.pop("color", None)
    if isinstance(y, dict):
        colors = _series_colors(list(y), binding, theme, color)

    fig, ax = figure(theme, figsize=figsize)
    with theme.context():
        if isinstance(y, dict):
            for (label, y_data), color in zip(y.items(), colors):
                ax.plot(x, y_data, label=label, color=color, **kwargs)
            ax.legend()
        else:
            ax.plot(x, y, color=color, **kwargs)
        _decorate(ax, title, xlabel, ylabel)

    _finish(fig, filename, output_dir, theme)
    return fig, ax


def bar(
    x: ArrayLike,
    y: ArrayLike | dict[str, ArrayLike],
    *,
    binding: CategoryColorBinding | None = None,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    bar_width: float = 0.8,
    stacked: bool = False,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Bar chart with one bar per category in ``x``.

    A single series is colored per ``x`` label through ``binding``. Pass a
    dict of {label: y_values} for grouped (or ``stacked``) bars, colored
    per series label instead. A caller-supplied ``color`` is used only
    when there is no binding.
    """
    categories = list(x)
    color = kwargs.pop("color", None)
    if isinstance(y, dict):
        if not y:
            raise ValueError("bar() needs at least one series")
        colors = _series_colors(list(y), binding, theme, color)
    elif binding is not None:
        colors = binding.resolve(categories)
    else:
        colors = color

    positions = np.arange(len(categories))
    fig, ax = figure(theme, figsize=figsize)
    with theme.context():
        if isinstance(y, dict):
            n = len(y)
            if stacked:
                bottom = np.zeros(len(categories))
                for (label, y_data), color in zip(y.items(), colors):
                    heights = np.asarray(y_data, dtype=float)
                    ax.bar(positions, heights, width=bar_width, bottom=bottom,
                           label=label, color=color, **kwargs)
                    bottom = bottom + heights
            else:
                width = bar_width / n
                offsets = np.linspace(-(n - 1) / 2 * width, (n - 1) / 2 * width, n)
                for offset, (label, y_data), color in zip(offsets, y.items(), colors):
                    ax.bar(positions + offset, y_data, width=width,
                           label=label, color=color, **kwargs)
            ax.legend()
        else:
            ax.bar(positions, y, width=bar_width, color=colors, **kwargs)

        ax.set_xticks(positions)
        ax.set_xticklabels([str(c) for c in categories])
        _decorate(ax, title, xlabel, ylabel)

    _finish(fig, filename, output_dir, theme)
    return fig, ax


def scatter(
    x: ArrayLike,
    y: ArrayLike | dict[str, tuple[ArrayLike, ArrayLike]],
    *,
    binding: CategoryColorBinding | None = None,
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Scatter plot. Pass a dict of {label: (x, y)} for multiple series.

    A caller-supplied ``color`` is used only when there is no binding.
    """
    color = kwargs.pop("color", None)
    if isinstance(y, dict):
        colors = _series_colors(list(y), binding, theme, color)

    fig, ax = figure(theme, figsize=figsize)
    with theme.context():
        if isinstance(y, dict):
            for (label, (x_data, y_data)), color in zip(y.items(), colors):
                ax.scatter(x_data, y_data, label=label, color=color, **kwargs)
            ax.legend()
        else:
            ax.scatter(x, y, color=color, **kwargs)
        _decorate(ax, title, xlabel, ylabel)

    _finish(fig, filename, output_dir, theme)
    return fig, ax


def count_bar(
    frame: pd.DataFrame,
    x: str,
    hue: str | None = None,
    *,
    binding: CategoryColorBinding | None = None,
    theme: Theme = DEFAULT_THEME,
    stacked: bool = False,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = "Count",
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Bar chart of row counts per ``x`` level, optionally split by ``hue``.

    Without ``hue`` the bars are colored per ``x`` level; with it, per
    ``hue`` level. Either way colors come from ``binding`` by label.
    """
    table = counts(frame, x, hue)
    if hue is None:
        y = table["count"].to_numpy()
    else:
        y = {label: table[label].to_numpy() for label in table.columns}

    fig, ax = bar(
        list(table.index),
        y,
        binding=binding,
        theme=theme,
        title=title,
        xlabel=xlabel if xlabel is not None else x,
        ylabel=ylabel,
        figsize=figsize,
        stacked=stacked,
        **kwargs,
    )
    if hue is not None:
        with theme.context():
            ax.get_legend().set_title(hue)

    _finish(fig, filename, output_dir, theme)
    return fig, ax
