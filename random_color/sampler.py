"""
Three-stage HSV sampling: hue → saturation → brightness.
Each stage is a bounded uniform draw shaped by the bounds table and the luminosity profile.
"""
from .bounds import BoundsTable
from .random_source import IntSource
from .schema import ColorScheme, Luminosity

# Luminosity profile constants
BRIGHT_MIN_SATURATION = 55
LIGHT_MAX_SATURATION = 55
DARK_SATURATION_SPAN = 10
DARK_BRIGHTNESS_SPAN = 20
MAX_SATURATION = 100
MAX_BRIGHTNESS = 100

# How Luminosity.RANDOM picks brightness:
#   fixed   -> always 100 (observable behavior of the original table-driven generator)
#   uniform -> uniform over [0, 100], like Luminosity.RANDOM saturation
RANDOM_BRIGHTNESS_FIXED = "fixed"
RANDOM_BRIGHTNESS_UNIFORM = "uniform"
RANDOM_BRIGHTNESS_POLICIES = (RANDOM_BRIGHTNESS_FIXED, RANDOM_BRIGHTNESS_UNIFORM)


def pick_hue(scheme: ColorScheme, table: BoundsTable, rng: IntSource) -> int:
    """Hue in [0, 360]; negative draws (Red's tail) wrap into [334, 360)."""
    hue_range = table.hue_range(scheme)
    hue = rng.randint(hue_range.lower, hue_range.upper)
    if hue < 0:
        hue += 360
    return hue


def pick_saturation(
    hue: int,
    luminosity: Luminosity,
    scheme: ColorScheme,
    table: BoundsTable,
    rng: IntSource,
) -> int:
    if scheme is ColorScheme.MONOCHROME:
        return 0
    if luminosity is Luminosity.RANDOM:
        return rng.randint(0, MAX_SATURATION)

    entry = table.entry_for_hue(hue)
    if entry is None:
        s_min, s_max = 0, MAX_SATURATION
    else:
        s_min, s_max = entry.saturation_range

    if luminosity is Luminosity.BRIGHT:
        s_min = BRIGHT_MIN_SATURATION
    elif luminosity is Luminosity.DARK:
        s_min = s_max - DARK_SATURATION_SPAN
    elif luminosity is Luminosity.LIGHT:
        s_max = LIGHT_MAX_SATURATION
    else:
        raise ValueError(f"Unhandled luminosity: {luminosity!r}")

    return rng.randint(s_min, s_max)


def pick_brightness(
    hue: int,
    saturation: int,
    luminosity: Luminosity,
    table: BoundsTable,
    rng: IntSource,
    *,
    random_policy: str = RANDOM_BRIGHTNESS_FIXED,
) -> int:
    b_min = minimum_brightness(hue, saturation, table)
    b_max = MAX_BRIGHTNESS

    if luminosity is Luminosity.DARK:
        b_max = b_min + DARK_BRIGHTNESS_SPAN
    elif luminosity is Luminosity.LIGHT:
        b_min = (b_max + b_min) // 2
    elif luminosity is Luminosity.RANDOM:
        if random_policy == RANDOM_BRIGHTNESS_FIXED:
            b_min = MAX_BRIGHTNESS
        elif random_policy == RANDOM_BRIGHTNESS_UNIFORM:
            b_min = 0
        else:
            raise ValueError(f"Unknown random brightness policy: {random_policy!r}")
    elif luminosity is not Luminosity.BRIGHT:
        raise ValueError(f"Unhandled luminosity: {luminosity!r}")

    return rng.randint(b_min, b_max)


def minimum_brightness(hue: int, saturation: int, table: BoundsTable) -> int:
    """
    Lowest brightness allowed at this saturation, interpolated on the hue family's
    lower-bound curve and floored. 0 when no curve segment brackets the saturation
    or no family owns the hue.
    """
    entry = table.entry_for_hue(hue)
    if entry is None:
        return 0
    points = entry.lower_bounds
    for (s1, v1), (s2, v2) in zip(points, points[1:]):
        if s1 <= saturation <= s2:
            # Exact integer form of floor(slope * s + intercept)
            return (v1 * (s2 - s1) + (v2 - v1) * (saturation - s1)) // (s2 - s1)
    return 0


def sample_hsv(
    scheme: ColorScheme,
    luminosity: Luminosity,
    table: BoundsTable,
    rng: IntSource,
    *,
    random_policy: str = RANDOM_BRIGHTNESS_FIXED,
) -> tuple[int, int, int]:
    """Run all three stages; returns (hue, saturation, brightness)."""
    h = pick_hue(scheme, table, rng)
    s = pick_saturation(h, luminosity, scheme, table, rng)
    v = pick_brightness(h, s, luminosity, table, rng, random_policy=random_policy)
    return h, s, v
