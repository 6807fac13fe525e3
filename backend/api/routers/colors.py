"""Colors router: create packed RGB/HSB values, read and replace their fields."""
import logging
from fastapi import APIRouter
from pydantic import BaseModel
from typing import Optional

from colorlib.colors import (
    create_rgb, create_hsb,
    rgb_components, hsb_components,
    replace_red, replace_green, replace_blue,
    replace_hue, replace_saturation, replace_brightness,
)
from ..types import RgbRecord, HsbRecord

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/colors", tags=["Colors"])


def rgb_record(rgb: int) -> RgbRecord:
    # report the packed value through the same low-32-bit view as its fields
    rgb &= 0xFFFFFFFF
    red, green, blue = rgb_components(rgb)
    return {"rgb": rgb, "red": red, "green": green, "blue": blue}


def hsb_record(hsb: int) -> HsbRecord:
    hsb &= 0xFFFFFFFF
    hue, saturation, brightness = hsb_components(hsb)
    return {"hsb": hsb, "hue": hue, "saturation": saturation, "brightness": brightness}


# ── RGB ───────────────────────────────────────────────────────

class RgbCreate(BaseModel):
    red: int
    green: int
    blue: int


class RgbUpdate(BaseModel):
    red: Optional[int] = None
    green: Optional[int] = None
    blue: Optional[int] = None


@router.post("/rgb", summary="Create RGB color", description="Pack red, green and blue into one integer. Each channel is masked to 8 bits.")
def post_rgb(body: RgbCreate):
    return rgb_record(create_rgb(body.red, body.green, body.blue))


@router.get("/rgb/{rgb}", summary="Read RGB color", description="Split a packed RGB integer into its channels.")
def get_rgb(rgb: int):
    return rgb_record(rgb)


@router.patch("/rgb/{rgb}", summary="Replace RGB channels", description="Replace any subset of red, green and blue. Omitted channels are kept.")
def patch_rgb(rgb: int, body: RgbUpdate):
    if body.red is not None:
        rgb = replace_red(rgb, body.red)
    if body.green is not None:
        rgb = replace_green(rgb, body.green)
    if body.blue is not None:
        rgb = replace_blue(rgb, body.blue)
    _logger.debug("patch_rgb -> %#010x", rgb)
    return rgb_record(rgb)


# ── HSB ───────────────────────────────────────────────────────

class HsbCreate(BaseModel):
    hue: int
    saturation: int
    brightness: int


class HsbUpdate(BaseModel):
    hue: Optional[int] = None
    saturation: Optional[int] = None
    brightness: Optional[int] = None


@router.post("/hsb", summary="Create HSB color", description="Pack hue (16 bits), saturation and brightness (8 bits each) into one integer.")
def post_hsb(body: HsbCreate):
    return hsb_record(create_hsb(body.hue, body.saturation, body.brightness))


@router.get("/hsb/{hsb}", summary="Read HSB color", description="Split a packed HSB integer into hue, saturation and brightness.")
def get_hsb(hsb: int):
    return hsb_record(hsb)


@router.patch("/hsb/{hsb}", summary="Replace HSB fields", description="Replace any subset of hue, saturation and brightness. Omitted fields are kept.")
def patch_hsb(hsb: int, body: HsbUpdate):
    if body.hue is not None:
        hsb = replace_hue(hsb, body.hue)
    if body.saturation is not None:
        hsb = replace_saturation(hsb, body.saturation)
    if body.brightness is not None:
        hsb = replace_brightness(hsb, body.brightness)
    _logger.debug("patch_hsb -> %#010x", hsb)
    return hsb_record(hsb)
