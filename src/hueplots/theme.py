"""Pure data: palettes, surface colors, fonts, and layout constants.

No library imports — this module defines the visual vocabulary as plain
Python dicts and lists so any consumer (matplotlib, Plotly, a CSS file) can
use it.
"""

# Okabe & Ito (2008) colorblind-safe palette, grey first
OKABE_ITO = [
    "#999999",  # grey
    "#E69F00",  # orange
    "#56B4E9",  # sky blue
    "#009E73",  # bluish green
    "#F0E442",  # yellow
    "#0072B2",  # blue
    "#D55E00",  # vermillion
    "#CC79A7",  # reddish purple
]

# Same palette with black in place of grey
OKABE_ITO_BLACK = ["#000000"] + OKABE_ITO[1:]

# matplotlib's tab10, for comparison against the safe palettes
TABLEAU = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]

GREYS = ["#252525", "#636363", "#969696", "#bdbdbd", "#d9d9d9"]

PALETTES = {
    "okabe_ito": OKABE_ITO,
    "okabe_ito_black": OKABE_ITO_BLACK,
    "tableau": TABLEAU,
    "greys": GREYS,
}

# Surface colors for the light and dark themes
COLORS = {
    "bg": "#FFFFFF",
    "text": "#222222",
    "muted": "#666666",
    "surface": "#F5F5F5",
    "border": "#CCCCCC",
}

DARK_COLORS = {
    "bg": "#1E1E1E",
    "text": "#EEEEEE",
    "muted": "#AAAAAA",
    "surface": "#2A2A2A",
    "border": "#4A4A4A",
}

FONTS = {
    "sans": [
        "Helvetica Neue", "Helvetica", "Arial",
        "DejaVu Sans", "sans-serif",
    ],
    "serif": ["Georgia", "Times New Roman", "DejaVu Serif", "serif"],
    "mono": ["Menlo", "Consolas", "DejaVu Sans Mono", "monospace"],
}

# Chart layout constants
LAYOUT = {
    "figsize": (7.0, 4.5),
    "dpi": 100,
    "base_size": 10,
    "title_scale": 1.4,
    "label_scale": 1.1,
    "tick_scale": 0.9,
    "line_width": 2.0,
    "spine_width": 0.8,
    "grid_alpha": 0.6,
    "legend_alpha": 0.9,
}


def get_palette(name: str) -> list[str]:
    """Return a copy of the named palette."""
    try:
        return list(PALETTES[name])
    except KeyError:
        raise KeyError(
            f"Unknown palette {name!r}; choose from {', '.join(sorted(PALETTES))}"
        ) from None
