"""Tests for table loading and categorical helpers."""

import pandas as pd
import pytest

from hueplots import as_category, counts, cut_ages, load_table
from hueplots.data import levels

from .conftest import AGE_LABELS


def test_as_category_orders_levels() -> None:
    series = pd.Series(["adult", "infant", "child"], name="age_group")
    result = as_category(series, AGE_LABELS)
    assert result.cat.ordered
    assert list(result.cat.categories) == AGE_LABELS
    assert result.name == "age_group"


def test_as_category_rejects_unknown_values() -> None:
    series = pd.Series(["adult", "senior"], name="age_group")
    with pytest.raises(ValueError, match="senior"):
        as_category(series, AGE_LABELS)


def test_as_category_keeps_missing() -> None:
    series = pd.Series(["adult", None])
    assert as_category(series, AGE_LABELS).isna().tolist() == [False, True]


def test_load_table_converts_categories(passengers_csv) -> None:
    frame = load_table(passengers_csv, categories={"age_group": AGE_LABELS, "pclass": [1, 2, 3]})
    assert isinstance(frame["age_group"].dtype, pd.CategoricalDtype)
    assert list(frame["pclass"].cat.categories) == [1, 2, 3]
    assert len(frame) == 8


def test_load_table_missing_column(passengers_csv) -> None:
    with pytest.raises(KeyError):
        load_table(passengers_csv, categories={"deck": ["A", "B"]})


def test_levels() -> None:
    assert levels(pd.Series([3, 1, 2, 1])) == [1, 2, 3]
    assert levels(pd.Series(pd.Categorical(["b"], categories=["b", "a"]))) == ["b", "a"]


def test_cut_ages() -> None:
    ages = pd.Series([0.5, 1.5, 2.0, 5.0, 30.0])
    groups = cut_ages(ages, [0, 2, 13, 120], AGE_LABELS)
    assert groups.astype(str).tolist() == ["infant", "infant", "child", "child", "adult"]


def test_cut_ages_wrong_edges() -> None:
    with pytest.raises(ValueError):
        cut_ages(pd.Series([1.0]), [0, 2], AGE_LABELS)


def test_counts_without_hue(passengers) -> None:
    table = counts(passengers, "age_group")
    assert list(table.index) == AGE_LABELS
    assert table["count"].tolist() == [2, 3, 3]


def test_counts_keeps_empty_levels(passengers) -> None:
    """Filtered-out categories still appear, with zero rows."""
    older = passengers[passengers["age_group"] != "infant"]
    table = counts(older, "age_group")
    assert list(table.index) == AGE_LABELS
    assert table["count"].tolist() == [0, 3, 3]


def test_counts_with_hue(passengers) -> None:
    table = counts(passengers, "age_group", "survived")
    assert list(table.index) == AGE_LABELS
    assert list(table.columns) == ["no", "yes"]
    assert table.loc["adult", "no"] == 2
    assert table.loc["adult", "yes"] == 1
    assert table.loc["child", "yes"] == 2
    assert table.loc["infant", "no"] == 1
