"""Color-vision-deficiency simulation and contrast checks.

Dichromacy is simulated with the Machado, Oliveira & Fernandes (2009)
matrices, applied to linear RGB. Partial severity blends the full matrix
with the identity, which tracks the published intermediate matrices
closely enough for eyeballing a palette.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import numpy as np

from .binding import CategoryColorBinding
from .style import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)

# Severity 1.0 matrices, linear RGB → linear RGB
_MACHADO = {
    "protan": np.array([
        [0.152286, 1.052583, -0.204868],
        [0.114503, 0.786281, 0.099216],
        [-0.003882, -0.048116, 1.051998],
    ]),
    "deutan": np.array([
        [0.367322, 0.860646, -0.227968],
        [0.280085, 0.672501, 0.047413],
        [-0.011820, 0.042940, 0.968881],
    ]),
    "tritan": np.array([
        [1.255528, -0.076749, -0.178779],
        [-0.078411, 0.930809, 0.147602],
        [0.004733, 0.691367, 0.303900],
    ]),
}

# Rec. 709 luminance weights
_LUMA = np.array([0.2126, 0.7152, 0.0722])

KINDS = ("deutan", "protan", "tritan", "desaturate")

# (kind, panel title) for cvd_grid
_GRID_PANELS = [
    ("deutan", "Deuteranomaly"),
    ("protan", "Protanomaly"),
    ("tritan", "Tritanomaly"),
    ("desaturate", "Desaturated"),
]


def _to_linear(rgb: np.ndarray) -> np.ndarray:
    return np.where(rgb <= 0.04045, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)


def _to_srgb(lin: np.ndarray) -> np.ndarray:
    lin = np.clip(lin, 0.0, 1.0)
    return np.where(lin <= 0.0031308, lin * 12.92, 1.055 * lin ** (1 / 2.4) - 0.055)


def _matrix(kind: str, severity: float) -> np.ndarray:
    if kind not in KINDS:
        raise ValueError(f"Unknown deficiency {kind!r}; choose from {', '.join(KINDS)}")
    if not 0.0 <= severity <= 1.0:
        raise ValueError(f"severity must be within [0, 1], got {severity}")
    if kind == "desaturate":
        full = np.tile(_LUMA, (3, 1))
    else:
        full = _MACHADO[kind]
    return (1.0 - severity) * np.eye(3) + severity * full


def simulate_rgb(rgb: np.ndarray, kind: str, severity: float = 1.0) -> np.ndarray:
    """Simulate ``kind`` on an ``(..., 3)`` array of sRGB floats in [0, 1]."""
    rgb = np.asarray(rgb, dtype=float)
    lin = _to_linear(rgb) @ _matrix(kind, severity).T
    return _to_srgb(lin)


def simulate(colors: Iterable, kind: str, severity: float = 1.0) -> list[str]:
    """Hex colors as they appear under the given deficiency."""
    rgb = np.array([mcolors.to_rgb(c) for c in colors], dtype=float).reshape(-1, 3)
    return [mcolors.to_hex(c) for c in simulate_rgb(rgb, kind, severity)]


def simulate_image(rgba: np.ndarray, kind: str, severity: float = 1.0) -> np.ndarray:
    """Simulate an RGBA image (uint8 or float); returns floats in [0, 1]."""
    image = np.asarray(rgba)
    if image.dtype == np.uint8:
        image = image / 255.0
    image = image.astype(float)
    out = image.copy()
    out[..., :3] = simulate_rgb(image[..., :3], kind, severity)
    return out


def simulate_binding(
    binding: CategoryColorBinding,
    kind: str,
    severity: float = 1.0,
) -> CategoryColorBinding:
    """A new binding with every color replaced by its simulated appearance."""
    return binding.recolor(simulate(binding.colors, kind, severity))


def render(fig: plt.Figure) -> np.ndarray:
    """Rasterize ``fig`` into an (H, W, 4) uint8 array."""
    fig.canvas.draw()
    return np.asarray(fig.canvas.buffer_rgba()).copy()


def cvd_grid(
    fig: plt.Figure,
    theme: Theme = DEFAULT_THEME,
    severity: float = 1.0,
    figsize: tuple[float, float] | None = None,
) -> plt.Figure:
    """Show ``fig`` as seen with each common deficiency, in a 2x2 grid."""
    image = render(fig)
    if figsize is None:
        w, h = fig.get_size_inches()
        figsize = (w * 1.5, h * 1.5)

    with theme.context():
        grid, axes = plt.subplots(2, 2, figsize=figsize)
        for ax, (kind, label) in zip(axes.ravel(), _GRID_PANELS):
            ax.imshow(simulate_image(image, kind, severity))
            ax.set_title(label)
            ax.set_axis_off()
        grid.tight_layout()
    logger.debug(f"Built CVD grid at severity {severity}")
    return grid


def relative_luminance(color) -> float:
    """WCAG relative luminance of a matplotlib color spec."""
    lin = _to_linear(np.array(mcolors.to_rgb(color)))
    return float(lin @ _LUMA)


def contrast_ratio(foreground, background) -> float:
    """WCAG 2.x contrast ratio, from 1.0 (none) to 21.0 (black on white)."""
    a = relative_luminance(foreground)
    b = relative_luminance(background)
    lighter, darker = max(a, b), min(a, b)
    return (lighter + 0.05) / (darker + 0.05)


def low_contrast(
    binding: CategoryColorBinding,
    background,
    minimum: float = 3.0,
) -> dict:
    """Labels whose color falls below ``minimum`` contrast against ``background``.

    3:1 is the WCAG AA threshold for graphical objects.
    """
    failing = {}
    for label, color in binding.items():
        ratio = contrast_ratio(color, background)
        if ratio < minimum:
            failing[label] = ratio
    if failing:
        logger.warning(f"{len(failing)} categories below {minimum}:1 contrast on {background}: {list(failing)}")
    return failing
