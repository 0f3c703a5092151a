"""hueplots — stable category colors, explicit themes and CVD checks for matplotlib."""

from .accessibility import contrast_ratio, cvd_grid, low_contrast, simulate, simulate_binding
from .binding import CategoryColorBinding, bind, from_palette, resolve
from .charts import bar, count_bar, figure, legend, line, save, scatter
from .data import as_category, counts, cut_ages, load_table
from .errors import ArityMismatch, BindingError, DuplicateLabel, UnknownLabel
from .facets import facet, side_by_side
from .style import CLASSIC_THEME, DARK_THEME, DEFAULT_THEME, MINIMAL_THEME, Theme
from .theme import COLORS, FONTS, LAYOUT, OKABE_ITO, OKABE_ITO_BLACK, PALETTES, get_palette

__all__ = [
    "bar",
    "count_bar",
    "figure",
    "legend",
    "line",
    "save",
    "scatter",
    "facet",
    "side_by_side",
    "CategoryColorBinding",
    "bind",
    "from_palette",
    "resolve",
    "ArityMismatch",
    "BindingError",
    "DuplicateLabel",
    "UnknownLabel",
    "as_category",
    "counts",
    "cut_ages",
    "load_table",
    "contrast_ratio",
    "cvd_grid",
    "low_contrast",
    "simulate",
    "simulate_binding",
    "Theme",
    "CLASSIC_THEME",
    "DARK_THEME",
    "DEFAULT_THEME",
    "MINIMAL_THEME",
    "COLORS",
    "FONTS",
    "LAYOUT",
    "OKABE_ITO",
    "OKABE_ITO_BLACK",
    "PALETTES",
    "get_palette",
]
