#!/usr/bin/env python
"""Demo: palettes derived from primary colors, and a linear-light gradient.

Each row shows the foreground tiers, then the background tiers, of a
palette derived from one primary color. The web and CSS strings of each
tier are printed.
"""

import numpy as np
import matplotlib.pyplot as plt

from chclt.color import DisplayRGB, LinearRGB
from chclt.gradient import Gradient
from chclt.palette import Palette
from chclt.space import DEFAULT


TIERS = [
    "primary_foreground",
    "secondary_foreground",
    "tertiary_foreground",
    "primary_background",
    "secondary_background",
    "tertiary_background",
    "divider",
    "placeholder",
]


def main():
    space = DEFAULT
    primaries = {
        "blue": LinearRGB.BLUE,
        "orange": LinearRGB.ORANGE,
        "spring": LinearRGB.SPRING.scale_luminance(0.3),
        "rose": LinearRGB.ROSE,
    }

    fig, axes = plt.subplots(len(primaries) + 1, 1, figsize=(10, 1.2 * (len(primaries) + 1)))

    for ax, (name, primary) in zip(axes, primaries.items()):
        palette = Palette(primary, space=space)
        colors = [getattr(palette, tier).display(space) for tier in TIERS]

        print(f"\n{name}")
        for tier, color in zip(TIERS, colors):
            print(f"  {tier:22s} {color.web():8s} {color.css()}")

        ax.imshow(np.array([c.clamped.rgb for c in colors])[np.newaxis, :, :], aspect="auto")
        ax.set_title(f"Palette from {name}", fontsize=9, loc="left")
        ax.set_axis_off()

    gradient = Gradient.from_display(
        space, [DisplayRGB.rgba(0.9, 0.1, 0.1), DisplayRGB.rgba(0.1, 0.9, 0.1), DisplayRGB.rgba(0.1, 0.1, 0.9)]
    )
    samples = gradient.sample(256)
    rgb = np.clip(space.display(samples[:, :3]), 0.0, 1.0)
    axes[-1].imshow(rgb[np.newaxis, :, :], aspect="auto")
    axes[-1].set_title("Gradient interpolated in linear light", fontsize=9, loc="left")
    axes[-1].set_axis_off()

    plt.tight_layout()
    plt.savefig("palette_demo.png", dpi=150)
    print("\nSaved plot to palette_demo.png")
    plt.show()


if __name__ == "__main__":
    main()
