import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from routeplanner.core.maps_service import MapsService, get_maps_service
from routeplanner.core.route_export import export_route
from routeplanner.core.route_optimizer import optimize_route
from routeplanner.core.schemas import (
    RouteExport,
    RouteExportRequest,
    RouteOptimization,
    RouteRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/route-optimization", tags=["route-optimization"])


@router.post("", response_model=RouteOptimization)
async def get_route_optimization(
    payload: RouteRequest,
    maps: MapsService | None = Depends(get_maps_service),
):
    """
    Optimize a day's route using Google Maps geocoding, walking times and directions.

    Lookup failures fall back to estimates inside the envelope; only a missing
    API key or an unexpected error produces a 500.
    """
    if maps is None:
        return JSONResponse(
            status_code=500, content={"error": "Google Maps API key not configured"}
        )

    try:
        return await optimize_route(payload, maps)
    except Exception as e:
        logger.error(f"Route optimization error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to optimize route"})


@router.post("/local", response_model=RouteOptimization)
async def get_local_route_optimization(payload: RouteRequest):
    """Optimize a route without any external lookups (fixed travel estimates)."""
    try:
        return await optimize_route(payload, None)
    except Exception as e:
        logger.error(f"Local route optimization error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to optimize route"})


@router.post("/export", response_model=RouteExport)
def export_optimized_route(payload: RouteExportRequest) -> RouteExport:
    """Timetable of an already optimized route, ready for download."""
    return export_route(payload.optimization, payload.start_time, payload.date)
