"""Tests for Theme objects and palette data."""

import copy
import dataclasses

import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import pytest

from hueplots import (
    CLASSIC_THEME,
    DARK_THEME,
    DEFAULT_THEME,
    MINIMAL_THEME,
    OKABE_ITO,
    Theme,
    figure,
    get_palette,
)
from hueplots.theme import PALETTES


def test_okabe_ito_palette() -> None:
    assert OKABE_ITO[:3] == ["#999999", "#E69F00", "#56B4E9"]
    assert len(OKABE_ITO) == 8


def test_get_palette_returns_copy() -> None:
    palette = get_palette("okabe_ito")
    palette.append("#000000")
    assert len(PALETTES["okabe_ito"]) == 8


def test_get_palette_unknown() -> None:
    with pytest.raises(KeyError, match="okabe_ito"):
        get_palette("rainbow")


def test_theme_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_THEME.base_size = 20


def test_replace_leaves_original() -> None:
    big = DEFAULT_THEME.replace(base_size=20)
    assert big.base_size == 20
    assert DEFAULT_THEME.base_size == 10
    assert big.rc()["font.size"] == 20


def test_sequences_stored_as_tuples() -> None:
    theme = Theme(palette=["#000000", "#FFFFFF"], spines=["left"])
    assert theme.palette == ("#000000", "#FFFFFF")
    assert theme.spines == ("left",)
    assert hash(theme) == hash(Theme(palette=("#000000", "#FFFFFF"), spines=("left",)))


def test_invalid_grid_axis() -> None:
    with pytest.raises(ValueError):
        Theme(grid_axis="diagonal")


def test_rc_reflects_theme() -> None:
    rc = DEFAULT_THEME.rc()
    assert rc["axes.facecolor"] == DEFAULT_THEME.background
    assert rc["axes.spines.top"] is False
    assert rc["axes.spines.left"] is True
    assert rc["axes.grid"] is True
    assert rc["axes.prop_cycle"].by_key()["color"] == list(DEFAULT_THEME.palette)


def test_extra_overrides_rc() -> None:
    theme = Theme(extra={"axes.titleweight": "normal"})
    assert theme.rc()["axes.titleweight"] == "normal"


def test_presets() -> None:
    assert MINIMAL_THEME.rc()["axes.grid"] is False
    assert CLASSIC_THEME.rc()["axes.spines.right"] is True
    assert "#999999" not in DARK_THEME.palette


def test_context_does_not_leak() -> None:
    """Drawing with a theme never changes the global rcParams."""
    keys = ["axes.facecolor", "figure.facecolor", "font.size", "axes.grid"]
    before = {key: plt.rcParams[key] for key in keys}
    with DARK_THEME.context():
        assert plt.rcParams["axes.facecolor"] == DARK_THEME.background
    assert {key: plt.rcParams[key] for key in keys} == before


def test_figure_uses_theme() -> None:
    fig, ax = figure(DARK_THEME)
    assert mcolors.to_hex(fig.get_facecolor()) == DARK_THEME.background.lower()
    assert mcolors.to_hex(ax.get_facecolor()) == DARK_THEME.background.lower()
    assert not ax.spines["top"].get_visible()


def test_figure_grid_of_axes() -> None:
    fig, axes = figure(nrows=2, ncols=3)
    assert axes.shape == (2, 3)


def test_extra_cannot_be_mutated() -> None:
    """Overrides are frozen so a shared theme can't be restyled in place."""
    theme = Theme(extra={"axes.titleweight": "normal"})
    with pytest.raises(TypeError):
        theme.extra["axes.facecolor"] = "#FF0000"
    with pytest.raises(TypeError):
        DEFAULT_THEME.extra["axes.facecolor"] = "#FF0000"
    assert DEFAULT_THEME.rc()["axes.facecolor"] == DEFAULT_THEME.background


def test_extra_copied_from_caller() -> None:
    overrides = {"axes.titleweight": "normal"}
    theme = Theme(extra=overrides)
    overrides["axes.titleweight"] = "bold"
    assert theme.rc()["axes.titleweight"] == "normal"


def test_replace_keeps_extra() -> None:
    theme = Theme(extra={"axes.titleweight": "normal"}).replace(base_size=12)
    assert theme.rc()["axes.titleweight"] == "normal"


def test_theme_deepcopies() -> None:
    theme = Theme(extra={"axes.titleweight": "normal"})
    assert copy.deepcopy(theme) == theme
    assert copy.deepcopy(theme).extra == theme.extra
