"""
Conversion between packed RGB and HSB colors stored as plain integers.

Layouts:
  RGB  bits 23-16 red,  15-8 green,      7-0 blue        (bits 31-24 ignored)
  HSB  bits 31-16 hue,  15-8 saturation, 7-0 brightness

Hue is in degrees (0-359); saturation and brightness run 0-255.
Every function accepts any int and reads it through its low 32 bits;
packed results are always unsigned 32-bit values. Nothing here raises.
"""

UNDEFINED_HUE = 0


# ─── component extraction ─────────────────────────────────────────────────────

def extract_red(rgb: int) -> int:
    return (rgb & 0x00FF0000) >> 16


def extract_green(rgb: int) -> int:
    return (rgb & 0x0000FF00) >> 8


def extract_blue(rgb: int) -> int:
    return rgb & 0x000000FF


def extract_hue(hsb: int) -> int:
    # masking first keeps the shift logical for negative input
    return (hsb & 0xFFFF0000) >> 16


def extract_saturation(hsb: int) -> int:
    return (hsb & 0x0000FF00) >> 8


def extract_brightness(hsb: int) -> int:
    return hsb & 0x000000FF


def rgb_components(rgb: int) -> tuple[int, int, int]:
    """Return (red, green, blue) of a packed RGB value."""
    return extract_red(rgb), extract_green(rgb), extract_blue(rgb)


def hsb_components(hsb: int) -> tuple[int, int, int]:
    """Return (hue, saturation, brightness) of a packed HSB value."""
    return extract_hue(hsb), extract_saturation(hsb), extract_brightness(hsb)


# ─── component replacement ────────────────────────────────────────────────────
# The new value is masked to the field width: 300 as a channel becomes 44.

def replace_red(rgb: int, red: int) -> int:
    return (rgb & 0xFF00FFFF) | ((red & 0xFF) << 16)


def replace_green(rgb: int, green: int) -> int:
    return (rgb & 0xFFFF00FF) | ((green & 0xFF) << 8)


def replace_blue(rgb: int, blue: int) -> int:
    return (rgb & 0xFFFFFF00) | (blue & 0xFF)


def replace_hue(hsb: int, hue: int) -> int:
    return (hsb & 0x0000FFFF) | ((hue & 0xFFFF) << 16)


def replace_saturation(hsb: int, saturation: int) -> int:
    return (hsb & 0xFFFF00FF) | ((saturation & 0xFF) << 8)


def replace_brightness(hsb: int, brightness: int) -> int:
    return (hsb & 0xFFFFFF00) | (brightness & 0xFF)


# ─── creation ─────────────────────────────────────────────────────────────────

def create_rgb(red: int, green: int, blue: int) -> int:
    """Pack three channels into an RGB int; each is masked to 8 bits."""
    return ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def create_hsb(hue: int, saturation: int, brightness: int) -> int:
    """
    Pack hue, saturation and brightness into an HSB int.

    Hue is masked to 16 bits, not wrapped to 360, so create_hsb(400, ...)
    stores 400 and hsb_to_rgb() later maps it to black.
    """
    return ((hue & 0xFFFF) << 16) | ((saturation & 0xFF) << 8) | (brightness & 0xFF)


# ─── color space conversion ───────────────────────────────────────────────────

def rgb_to_hsb(rgb: int) -> int:
    """
    Convert a packed RGB value to packed HSB.

    Achromatic input (red == green == blue) gets saturation 0 and
    UNDEFINED_HUE. When two channels share the maximum, red wins over
    green and green over blue in picking the hue formula.
    """
    red, green, blue = rgb_components(rgb)

    c_max = max(red, green, blue)
    c_min = min(red, green, blue)
    brightness = c_max

    if c_max != 0:
        saturation = 255 * (c_max - c_min) // c_max
    else:
        saturation = 0

    if saturation == 0:
        hue = UNDEFINED_HUE
    else:
        delta = float(c_max - c_min)
        if red == c_max:
            h = (green - blue) / delta
        elif green == c_max:
            h = 2.0 + (blue - red) / delta
        else:
            h = 4.0 + (red - green) / delta
        h *= 60.0
        if h < 0:
            h += 360
        if h >= 360:
            h -= 360
        hue = int(h)

    return create_hsb(hue, saturation, brightness)


def hsb_to_rgb(hsb: int) -> int:
    """
    Convert a packed HSB value to packed RGB.

    Channels are truncated, not rounded. A hue of 360 or more with
    non-zero saturation lies outside the six sectors and yields black.
    """
    hue, saturation, brightness = hsb_components(hsb)

    if saturation == 0:
        return create_rgb(brightness, brightness, brightness)

    h = hue / 60.0
    sector = int(h)
    f = h - sector
    v = brightness / 255.0
    s = saturation / 255.0

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

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
        r, g, b = 0.0, 0.0, 0.0

    return create_rgb(int(r * 255), int(g * 255), int(b * 255))
