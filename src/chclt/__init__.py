"""CHCLT: Cole Hue Chroma Luma Transform.

A perceptual color model over linear RGB for adjusting hue, chroma,
luminance and contrast independently, including:

- Transfer functions between display and linear RGB (sRGB, BT, ROMM, power law)
- Luminance and contrast relative to a medium luminance
- Hue rotation about the gray axis at constant luminance
- Chroma as a fraction of the headroom inside the unit cube
- Composite transforms, palettes and gradients
- Supporting colorimetry (XYZ, Lab, LCh) and small linear algebra

References:
    - ITU-R BT.709 / BT.2020, IEC 61966-2-1 (sRGB), ISO 22028-2 (ROMM)
    - WCAG 2 contrast ratio (for the G18 configuration)
"""

from chclt.polynomial import evaluate, quadratic_roots, cubic_roots
from chclt.matrix import Matrix3x3, SingularMatrixError
from chclt.colorimetry import (
    tristimulus,
    rgb_to_xyz_with_chromaticities,
    luminance_coefficients,
    xyz_from_linear_rgb,
    linear_rgb_from_xyz,
    lab_to_xyz,
    xyz_to_lab,
    lab_to_lch,
    lch_to_lab,
)
from chclt.params import Contrast, ConfigurationError, default_power
from chclt.transfer import (
    Identity,
    PowerLaw,
    SRGB,
    BT,
    ROMM,
    TransferFunction,
    transfer_signed,
    default_contrast,
)
from chclt.space import (
    CHCLT,
    SPACES,
    DEFAULT,
    available_spaces,
    get_space,
)
from chclt.engine import (
    normalize,
    illuminate,
    saturate,
    saturation,
    apply_luminance,
    match_luminance,
    is_dark,
    contrast,
    scale_contrast,
    apply_contrast,
    match_contrast,
    contrasting,
    hue,
    hue_shift,
    hue_push,
    pure,
    hue_range,
    luminance_ramp,
    maximum_chroma,
    minimum_chroma,
    chroma,
    scale_chroma,
    apply_chroma,
    match_chroma,
    hcl,
    Mode,
    Effect,
    Transform,
    transform,
)
from chclt.color import LinearRGB, DisplayRGB
from chclt.palette import Adjustment, Palette
from chclt.gradient import ColorStop, Gradient

__version__ = "0.1.0"

__all__ = [
    # polynomial
    "evaluate",
    "quadratic_roots",
    "cubic_roots",
    # matrix
    "Matrix3x3",
    "SingularMatrixError",
    # colorimetry
    "tristimulus",
    "rgb_to_xyz_with_chromaticities",
    "luminance_coefficients",
    "xyz_from_linear_rgb",
    "linear_rgb_from_xyz",
    "lab_to_xyz",
    "xyz_to_lab",
    "lab_to_lch",
    "lch_to_lab",
    # params
    "Contrast",
    "ConfigurationError",
    "default_power",
    # transfer
    "Identity",
    "PowerLaw",
    "SRGB",
    "BT",
    "ROMM",
    "TransferFunction",
    "transfer_signed",
    "default_contrast",
    # space
    "CHCLT",
    "SPACES",
    "DEFAULT",
    "available_spaces",
    "get_space",
    # engine
    "normalize",
    "illuminate",
    "saturate",
    "saturation",
    "apply_luminance",
    "match_luminance",
    "is_dark",
    "contrast",
    "scale_contrast",
    "apply_contrast",
    "match_contrast",
    "contrasting",
    "hue",
    "hue_shift",
    "hue_push",
    "pure",
    "hue_range",
    "luminance_ramp",
    "maximum_chroma",
    "minimum_chroma",
    "chroma",
    "scale_chroma",
    "apply_chroma",
    "match_chroma",
    "hcl",
    "Mode",
    "Effect",
    "Transform",
    "transform",
    # color
    "LinearRGB",
    "DisplayRGB",
    # palette
    "Adjustment",
    "Palette",
    # gradient
    "ColorStop",
    "Gradient",
]
