# Random colors constrained by hue family (scheme) and brightness/saturation profile (luminosity)

from .schema import Color, ColorScheme, Luminosity, Options, Range
from .bounds import BoundsEntry, BoundsError, BoundsTable, default_table
from .convert import hsv_to_color
from .random_source import RandomSource
from .generator import (
    RandomColorGenerator,
    default_generator,
    get_color,
    get_colors,
    get_colors_for,
    seed,
)

__all__ = [
    "Color",
    "ColorScheme",
    "Luminosity",
    "Options",
    "Range",
    "BoundsEntry",
    "BoundsError",
    "BoundsTable",
    "default_table",
    "hsv_to_color",
    "RandomSource",
    "RandomColorGenerator",
    "default_generator",
    "get_color",
    "get_colors",
    "get_colors_for",
    "seed",
]
