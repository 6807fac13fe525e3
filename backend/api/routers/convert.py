"""Convert router: RGB <-> HSB conversion, single values and batches."""
import logging
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from typing import List

from colorlib.colors import rgb_to_hsb, hsb_to_rgb
from ..dependencies import MAX_BATCH, BATCH_RATE_LIMIT, _sanitize_500, limiter
from ..types import Direction
from .colors import rgb_record, hsb_record

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/colors", tags=["Convert"])


@router.get("/rgb/{rgb}/hsb", summary="RGB to HSB", description="Convert a packed RGB integer to packed HSB. Grey input gets hue 0 and saturation 0.")
def get_rgb_as_hsb(rgb: int):
    return {"source": rgb_record(rgb), "result": hsb_record(rgb_to_hsb(rgb))}


@router.get("/hsb/{hsb}/rgb", summary="HSB to RGB", description="Convert a packed HSB integer to packed RGB. A hue of 360 or more yields black.")
def get_hsb_as_rgb(hsb: int):
    return {"source": hsb_record(hsb), "result": rgb_record(hsb_to_rgb(hsb))}


class BatchConvert(BaseModel):
    direction: Direction
    values: List[int]


@router.post("/convert", summary="Batch conversion", description="Convert a list of packed integers in one direction, preserving order.")
@limiter.limit(BATCH_RATE_LIMIT)
def post_convert(request: Request, body: BatchConvert):
    if len(body.values) > MAX_BATCH:
        raise HTTPException(
            status_code=400,
            detail=f"Too many values: {len(body.values)} (max {MAX_BATCH})",
        )
    try:
        if body.direction == "rgb_to_hsb":
            results = [hsb_record(rgb_to_hsb(v)) for v in body.values]
        else:
            results = [rgb_record(hsb_to_rgb(v)) for v in body.values]
    except Exception as e:
        raise _sanitize_500(e, context="convert")
    _logger.debug("batch %s: %d values", body.direction, len(results))
    return {"direction": body.direction, "count": len(results), "results": results}
