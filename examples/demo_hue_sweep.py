#!/usr/bin/env python
"""Demo: hue sweeps and luminance ramps as swatches.

Renders, for a few named color spaces:
- a sweep of fully saturated hues
- the same hues held at medium luminance
- luminance ramps at several chroma levels

Colors at equal luminance should appear equally light, which is the
point of comparison with an HSB hue wheel shown in the last row.
"""

import numpy as np
import matplotlib.pyplot as plt

from chclt import engine
from chclt.color import DisplayRGB
from chclt.space import get_space


def swatch_row(space, linear_colors):
    """Display RGB rows for imshow, shape (1, n, 3)."""
    rgb = np.array([np.clip(space.display(v), 0.0, 1.0) for v in linear_colors])
    return rgb[np.newaxis, :, :]


def main():
    count = 24
    names = ["srgb", "display_p3", "bt2020"]

    fig, axes = plt.subplots(len(names) * 3 + 1, 1, figsize=(10, 1.0 * (len(names) * 3 + 1)))

    row = 0
    for name in names:
        space = get_space(name)
        m = space.medium_luminance

        saturated = engine.hue_range(count, 1.0 / count, space)
        medium = [engine.pure(h, space, lum=m) for h in np.arange(count) / count]
        ramp = engine.luminance_ramp(count, 0.02, 0.98, space, hue_start=0.6, chroma_value=0.6)

        for label, colors in [
            (f"{name}: pure hues", saturated),
            (f"{name}: hues at medium luminance {m:.3f}", medium),
            (f"{name}: luminance ramp", ramp),
        ]:
            ax = axes[row]
            ax.imshow(swatch_row(space, colors), aspect="auto")
            ax.set_title(label, fontsize=9, loc="left")
            ax.set_axis_off()
            row += 1

        lums = [space.luminance(v) for v in medium]
        print(f"{name}: medium luminance {m:.4f}, swatch luminance spread {np.ptp(lums):.2e}")

    hsb = [DisplayRGB.from_hsb(h, 1.0, 1.0).rgb for h in np.arange(count) / count]
    axes[row].imshow(np.array(hsb)[np.newaxis, :, :], aspect="auto")
    axes[row].set_title("HSB hues for comparison", fontsize=9, loc="left")
    axes[row].set_axis_off()

    plt.tight_layout()
    plt.savefig("hue_sweep_demo.png", dpi=150)
    print("\nSaved plot to hue_sweep_demo.png")
    plt.show()


if __name__ == "__main__":
    main()
