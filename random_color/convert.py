"""
HSV → RGB conversion (standard six-sector wheel). Output alpha is always opaque.
"""
import math

from .schema import Color

OPAQUE = 255


def hsv_to_color(hue: int, saturation: int, value: int) -> Color:
    """
    Convert hue 0–360, saturation 0–100, value 0–100 to an RGBA Color.
    Hue 0 is read as 1 and 360 as 359 so the sector math never sits exactly on the wheel boundary.
    """
    if not 0 <= hue <= 360:
        raise ValueError(f"hue {hue} outside 0-360")
    if not 0 <= saturation <= 100:
        raise ValueError(f"saturation {saturation} outside 0-100")
    if not 0 <= value <= 100:
        raise ValueError(f"value {value} outside 0-100")

    h = float(hue)
    if h == 0:
        h = 1.0
    if h == 360:
        h = 359.0

    h /= 360.0
    s = saturation / 100.0
    v = value / 100.0

    sector = math.floor(h * 6.0)
    f = h * 6.0 - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    elif sector == 5:
        r, g, b = v, p, q
    else:
        raise RuntimeError(f"HSV sector {sector} out of range for hue {hue}")

    return Color(
        math.floor(r * 255.0),
        math.floor(g * 255.0),
        math.floor(b * 255.0),
        OPAQUE,
    )
