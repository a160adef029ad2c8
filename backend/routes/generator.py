"""
Floor plan generation API route.

Endpoints:
  POST /api/generator/svg    — Generate a plan, return the SVG document
  POST /api/generator/layout — Generate a plan, return rooms + SVG as JSON
"""

import logging
import random
import uuid

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from config import STRICT_LAYOUT
from schemas import GeneratedPlanOut, GeneratorConfigIn
from services.plan_generator import (
    DEFAULT_LAYOUT,
    FloorPlanGenerator,
    FloorPlanLayout,
    GeneratorConfig,
    LayoutError,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/generator", tags=["generator"])

SVG_MEDIA_TYPE = "image/svg+xml"


def _generate(req: GeneratorConfigIn) -> FloorPlanLayout:
    layout = DEFAULT_LAYOUT.with_overrides(strict=STRICT_LAYOUT)
    config = GeneratorConfig(
        offices=req.offices,
        meeting_rooms=req.meeting_rooms,
        toilets=req.toilets,
    )
    rng = random.Random(req.seed) if req.seed is not None else random.Random()
    try:
        return FloorPlanGenerator(layout).generate(config, rng)
    except LayoutError as e:
        logger.warning(f"Layout rejected for {config.to_dict()}: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/svg")
async def generate_svg(req: GeneratorConfigIn):
    """Generate a floor plan and return it as a standalone SVG image."""
    plan = _generate(req)
    return Response(content=plan.svg, media_type=SVG_MEDIA_TYPE)


@router.post("/layout", response_model=GeneratedPlanOut)
async def generate_layout(req: GeneratorConfigIn):
    """Generate a floor plan and return its rooms alongside the SVG."""
    plan = _generate(req)
    data = plan.to_dict()
    return GeneratedPlanOut(
        plan_id=f"gen-{uuid.uuid4().hex[:12]}",
        name=data["name"],
        rooms=data["rooms"],
        zones=data["zones"],
        metadata=data["metadata"],
        svg=data["svg"],
    )
