"""Example: compare a default palette with Okabe-Ito under simulated CVD."""

from pathlib import Path

import hueplots as hp

DATA = Path(__file__).parent / "data" / "passengers.csv"
CLASSES = [1, 2, 3]

passengers = hp.load_table(DATA, categories={"pclass": CLASSES})

for name in ("tableau", "okabe_ito"):
    # Skip grey: it reads as "missing" next to saturated colors
    palette = hp.get_palette(name)[1:] if name == "okabe_ito" else hp.get_palette(name)
    classes = hp.from_palette(CLASSES, palette)

    fig, ax = hp.scatter(
        None,
        {
            c: (group["age"], group["fare"])
            for c, group in passengers.groupby("pclass", observed=False)
        },
        binding=classes,
        title=f"Fare by Age ({name})",
        xlabel="Age",
        ylabel="Fare",
    )
    grid = hp.cvd_grid(fig)
    hp.save(grid, f"cvd-{name}.png")
    hp.save(fig, f"fare-{name}.svg")

    for label, ratio in hp.low_contrast(classes, hp.DEFAULT_THEME.background).items():
        print(f"{name}: class {label} contrast {ratio:.2f}:1")
