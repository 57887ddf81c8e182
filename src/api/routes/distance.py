"""
Distance endpoints
==================

POST /api/distance/calculate -- great-circle distance between two points
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request

from src.api.dependencies import get_calculator
from src.api.middleware import error_response, limiter
from src.api.schemas import DistanceRequest, DistanceResponse, ErrorResponse
from src.config import settings
from src.domain.calculator import DistanceCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/distance", tags=["distance"])


@router.post(
    "/calculate",
    response_model=DistanceResponse,
    summary="Calculate the distance between two coordinates",
    description=(
        "Returns the great-circle (Haversine) distance in kilometres, "
        "rounded to 3 decimal places, together with the input points."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing or out-of-range coordinates."},
        500: {"model": ErrorResponse, "description": "Internal server error."},
    },
)
@limiter.limit(settings.rate_limit)
async def calculate_distance(
    request: Request,
    body: Optional[DistanceRequest] = None,
    calculator: DistanceCalculator = Depends(get_calculator),
):
    if body is None:
        logger.warning("Received empty request body")
        return error_response(400, "Request body must not be empty")

    result = calculator.compute(
        body.from_.to_domain() if body.from_ else None,
        body.to.to_domain() if body.to else None,
    )

    if not result.is_ok:
        error = result.error
        if error.is_validation_error:
            logger.warning("Validation failed: %s", error.details)
            return error_response(400, error.message, error.details)
        return error_response(500, error.message, error.details)

    return DistanceResponse.from_result(result.value)
