"""Example: one color per age group, kept stable when a group is left out."""

from pathlib import Path

import hueplots as hp

DATA = Path(__file__).parent / "data" / "passengers.csv"
AGE_GROUPS = ["infant", "child", "adult"]

passengers = hp.load_table(DATA, categories={"survived": ["no", "yes"]})
passengers["age_group"] = hp.cut_ages(passengers["age"], [0, 2, 13, 120], AGE_GROUPS)

ages = hp.from_palette(AGE_GROUPS, hp.OKABE_ITO)

hp.count_bar(
    passengers,
    "age_group",
    binding=ages,
    title="Passengers by Age Group",
    xlabel="Age group",
    filename="age-groups.svg",
)

# Drop infants: "child" and "adult" keep the colors they had above
older = passengers[passengers["age_group"] != "infant"].copy()
older["age_group"] = hp.as_category(older["age_group"].astype(str), ["child", "adult"])

hp.count_bar(
    older,
    "survived",
    hue="age_group",
    binding=ages,
    title="Survival, Children vs Adults",
    xlabel="Survived",
    filename="survival-children-adults.svg",
)
