"""Example: one panel per passenger class, shared age-group colors."""

from pathlib import Path

import hueplots as hp

DATA = Path(__file__).parent / "data" / "passengers.csv"
AGE_GROUPS = ["infant", "child", "adult"]

passengers = hp.load_table(DATA, categories={"pclass": [1, 2, 3]})
passengers["age_group"] = hp.cut_ages(passengers["age"], [0, 2, 13, 120], AGE_GROUPS)
ages = hp.from_palette(AGE_GROUPS, hp.OKABE_ITO)


def draw(ax, rows, pclass):
    table = hp.counts(rows, "age_group")
    ax.bar(range(len(table)), table["count"], color=ages.resolve(table.index))
    ax.set_xticks(range(len(table)))
    ax.set_xticklabels(table.index)


fig, axes = hp.facet(passengers, "pclass", draw, ncols=3, title="Age Groups by Class")
hp.legend(axes[0, -1], ages, title="Age group")
hp.save(fig, "class-facets.svg")
