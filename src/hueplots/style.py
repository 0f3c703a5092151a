"""Translate theme.py constants into matplotlib rcParams.

A :class:`Theme` is an immutable value. Chart functions receive one
explicitly and apply it with :meth:`Theme.context`, so styling is scoped to
the call that drew the chart and the process-wide rcParams stay untouched.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

import matplotlib as mpl

from .theme import COLORS, DARK_COLORS, FONTS, LAYOUT, OKABE_ITO


@dataclass(frozen=True)
class Theme:
    background: str = COLORS["bg"]
    text: str = COLORS["text"]
    muted: str = COLORS["muted"]
    surface: str = COLORS["surface"]
    border: str = COLORS["border"]
    palette: tuple[str, ...] = tuple(OKABE_ITO)
    font_family: str = "sans-serif"
    fonts: tuple[str, ...] = tuple(FONTS["sans"])
    base_size: float = LAYOUT["base_size"]
    figsize: tuple[float, float] = LAYOUT["figsize"]
    dpi: int = LAYOUT["dpi"]
    grid: bool = True
    grid_axis: str = "y"  # "x", "y" or "both"
    legend_loc: str = "best"
    spines: tuple[str, ...] = ("left", "bottom")
    line_width: float = LAYOUT["line_width"]
    # rcParams overrides; a dict is accepted and stored as (key, value) pairs
    extra: tuple = field(default=(), hash=False, compare=False)

    def __post_init__(self):
        if self.grid_axis not in ("x", "y", "both"):
            raise ValueError(f"grid_axis must be 'x', 'y' or 'both', got {self.grid_axis!r}")
        # Accept lists from callers but keep the stored value immutable
        for name in ("palette", "fonts", "spines", "figsize"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "extra", tuple(dict(self.extra).items()))

    def replace(self, **changes) -> Theme:
        """Return a copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def rc(self) -> dict:
        """The matplotlib rcParams this theme stands for."""
        size = self.base_size
        style = {
            # Figure
            "figure.figsize": self.figsize,
            "figure.dpi": self.dpi,
            "figure.facecolor": self.background,
            "figure.edgecolor": "none",
            "savefig.dpi": self.dpi,
            "savefig.facecolor": self.background,
            "savefig.edgecolor": "none",
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.3,

            # Axes
            "axes.facecolor": self.background,
            "axes.edgecolor": self.border,
            "axes.linewidth": LAYOUT["spine_width"],
            "axes.titlesize": size * LAYOUT["title_scale"],
            "axes.titleweight": "bold",
            "axes.titlecolor": self.text,
            "axes.titlepad": 12,
            "axes.labelsize": size * LAYOUT["label_scale"],
            "axes.labelcolor": self.text,
            "axes.labelpad": 6,
            "axes.prop_cycle": mpl.cycler(color=list(self.palette)),
            "axes.spines.left": "left" in self.spines,
            "axes.spines.bottom": "bottom" in self.spines,
            "axes.spines.top": "top" in self.spines,
            "axes.spines.right": "right" in self.spines,
            "axes.grid": self.grid,
            "axes.grid.axis": self.grid_axis,
            "axes.axisbelow": True,

            # Grid
            "grid.color": self.border,
            "grid.alpha": LAYOUT["grid_alpha"],
            "grid.linewidth": 0.5,

            # Ticks
            "xtick.labelsize": size * LAYOUT["tick_scale"],
            "ytick.labelsize": size * LAYOUT["tick_scale"],
            "xtick.color": self.muted,
            "ytick.color": self.muted,
            "xtick.labelcolor": self.text,
            "ytick.labelcolor": self.text,
            "xtick.direction": "out",
            "ytick.direction": "out",

            # Lines
            "lines.linewidth": self.line_width,
            "lines.markersize": 6,

            # Legend
            "legend.loc": self.legend_loc,
            "legend.frameon": True,
            "legend.facecolor": self.surface,
            "legend.edgecolor": self.border,
            "legend.framealpha": LAYOUT["legend_alpha"],
            "legend.fontsize": size * LAYOUT["tick_scale"],
            "legend.title_fontsize": size,
            "legend.labelcolor": self.text,

            # Font
            "font.family": self.font_family,
            f"font.{self.font_family}": list(self.fonts),
            "font.size": size,
            "text.color": self.text,
        }
        style.update(dict(self.extra))
        return style

    def context(self):
        """Context manager applying this theme inside a ``with`` block only."""
        return mpl.rc_context(self.rc())


DEFAULT_THEME = Theme()

MINIMAL_THEME = Theme(grid=False, spines=("bottom",))

CLASSIC_THEME = Theme(
    spines=("left", "bottom", "top", "right"),
    grid_axis="both",
    font_family="serif",
    fonts=tuple(FONTS["serif"]),
)

DARK_THEME = Theme(
    background=DARK_COLORS["bg"],
    text=DARK_COLORS["text"],
    muted=DARK_COLORS["muted"],
    surface=DARK_COLORS["surface"],
    border=DARK_COLORS["border"],
    # grey disappears against the dark background
    palette=tuple(OKABE_ITO[1:]),
)
