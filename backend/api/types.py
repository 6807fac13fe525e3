"""Common type aliases for the color conversion API."""
from typing import Any, Literal

# A packed color plus its unpacked fields, as returned by the endpoints
RgbRecord = dict[str, Any]
HsbRecord = dict[str, Any]

Direction = Literal["rgb_to_hsb", "hsb_to_rgb"]
