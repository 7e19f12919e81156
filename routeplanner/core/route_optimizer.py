"""
Route assembly: runs the scheduling pipeline and packages the route envelope.

The same pipeline serves both the Google-backed optimization and the local
fallback; without a maps service every external lookup is skipped and the
fixed travel estimates are used.
"""

import logging
from datetime import date

from routeplanner.core.break_planner import generate_smart_breaks
from routeplanner.core.geocoder import geocode_activities
from routeplanner.core.maps_service import MapsService
from routeplanner.core.scheduler import apply_smart_scheduling
from routeplanner.core.schemas import RouteOptimization, RouteRequest
from routeplanner.core.suggestions import (
    generate_optimization_suggestions,
    get_energy_distribution,
)
from routeplanner.core.transport_options import get_transportation_options
from routeplanner.core.travel_times import (
    calculate_total_duration,
    calculate_total_walking_time,
    resolve_travel_times,
)

logger = logging.getLogger(__name__)


async def optimize_route(
    payload: RouteRequest,
    maps: MapsService | None,
    today: date | None = None,
) -> RouteOptimization:
    """
    Optimize one day's route.

    Steps:
        1. Geocode activities without coordinates
        2. Apply the scheduling rules and sort
        3. Fetch walking times for the final order
        4. Look up transport options for the first legs
        5. Suggest breaks and tips

    Args:
        payload: Validated route request
        maps: Maps service, or None to compute the route without external lookups
        today: Date used for weekday rules (defaults to the server date)

    Returns:
        Complete route envelope; partial lookup failures fall back to estimates
    """
    # Client-supplied travel times belong to an order that is about to change
    activities = [a.model_copy(update={"travel_times": None}) for a in payload.activities]

    if maps is not None:
        activities = await geocode_activities(activities, payload.destination, maps)

    scheduled = apply_smart_scheduling(
        activities, payload.start_time, payload.destination, payload.trip_day, today=today
    )

    real_travel_times = False
    if maps is not None:
        scheduled, real_travel_times = await resolve_travel_times(scheduled, maps)

    transportation_options = await get_transportation_options(scheduled, maps)

    breaks = generate_smart_breaks(
        scheduled, payload.start_time, payload.energy_level, payload.include_breaks
    )
    suggestions = generate_optimization_suggestions(
        scheduled, payload.destination, payload.trip_day, payload.weather_backup
    )

    logger.info(
        f"[RouteOptimizer] Optimized {len(scheduled)} activities for "
        f"'{payload.destination}' (real travel times: {real_travel_times})"
    )

    return RouteOptimization(
        optimized_order=scheduled,
        total_walking_time=calculate_total_walking_time(scheduled),
        total_duration=calculate_total_duration(scheduled),
        energy_distribution=get_energy_distribution(scheduled),
        suggestions=suggestions,
        breaks=breaks,
        transportation_options=transportation_options,
        real_travel_times=real_travel_times,
    )
