"""Example: the same chart under each built-in theme."""

from pathlib import Path

import hueplots as hp

DATA = Path(__file__).parent / "data" / "passengers.csv"

passengers = hp.load_table(
    DATA,
    categories={"sex": ["female", "male"], "survived": ["no", "yes"]},
)
outcome = hp.bind(["no", "yes"], [hp.OKABE_ITO[6], hp.OKABE_ITO[5]])

themes = {
    "default": hp.DEFAULT_THEME,
    "minimal": hp.MINIMAL_THEME,
    "classic": hp.CLASSIC_THEME,
    "dark": hp.DARK_THEME,
    "large": hp.DEFAULT_THEME.replace(base_size=14, legend_loc="upper left"),
}

for name, theme in themes.items():
    hp.count_bar(
        passengers,
        "sex",
        hue="survived",
        binding=outcome,
        theme=theme,
        title=f"Survival by Sex ({name})",
        filename=f"theme-{name}.svg",
    )
