"""Shared test fixtures."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from hueplots import CategoryColorBinding, bind

AGE_LABELS = ["infant", "child", "adult"]
AGE_COLORS = ["#999999", "#E69F00", "#56B4E9"]


@pytest.fixture
def ages() -> CategoryColorBinding:
    """The infant/child/adult binding used throughout the examples."""
    return bind(AGE_LABELS, AGE_COLORS)


@pytest.fixture
def passengers() -> pd.DataFrame:
    """A tiny passenger table with categorical grouping columns."""
    frame = pd.DataFrame(
        {
            "age": [0.5, 1.5, 5.0, 9.0, 30.0, 44.0, 61.0, 12.0],
            "age_group": ["infant", "infant", "child", "child", "adult", "adult", "adult", "child"],
            "survived": ["yes", "no", "yes", "yes", "no", "no", "yes", "no"],
            "pclass": [3, 2, 3, 1, 1, 3, 2, 3],
        }
    )
    frame["age_group"] = pd.Categorical(frame["age_group"], categories=AGE_LABELS, ordered=True)
    frame["survived"] = pd.Categorical(frame["survived"], categories=["no", "yes"], ordered=True)
    return frame


@pytest.fixture
def passengers_csv(tmp_path, passengers):
    """The passenger table written to a CSV file."""
    path = tmp_path / "passengers.csv"
    passengers.to_csv(path, index=False)
    return path


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
