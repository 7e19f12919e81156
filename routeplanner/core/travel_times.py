"""
Utilities for attaching and reading walking times between consecutive activities.
"""

import asyncio
import logging

from routeplanner.core.maps_service import MapsService
from routeplanner.core.schemas import Activity

logger = logging.getLogger(__name__)

# Used for any leg without a real travel time
FALLBACK_TRAVEL_MINUTES = 15


async def resolve_travel_times(
    activities: list[Activity], maps: MapsService
) -> tuple[list[Activity], bool]:
    """
    Attach walking times to activities from one distance-matrix call.

    Each geocoded activity gets ``travel_times`` aligned with ``activities``:
    entry j is the walk to ``activities[j]``. Destinations without
    coordinates get the fallback estimate. Call this only once the order is
    final; re-sorting afterwards would misalign the times.

    Args:
        activities: Activities in their final order (not modified)
        maps: Maps service used for the matrix lookup

    Returns:
        Tuple of (activities with travel times, whether real times were fetched)
    """
    positions = [i for i, a in enumerate(activities) if a.coordinates is not None]
    if len(positions) < 2:
        return list(activities), False

    points = [activities[i].coordinates for i in positions]
    try:
        matrix = await asyncio.to_thread(maps.walking_matrix, points)
    except Exception as e:
        logger.warning(f"[TravelTimes] Distance matrix lookup raised: {e}")
        matrix = None

    if not matrix or len(matrix) != len(positions):
        logger.info("[TravelTimes] Using fallback travel estimates")
        return list(activities), False

    # Map each geocoded activity's position in the route to its matrix column
    column_of = {position: column for column, position in enumerate(positions)}

    timed = list(activities)
    for row_index, position in enumerate(positions):
        row = matrix[row_index]
        times = []
        for j in range(len(activities)):
            column = column_of.get(j)
            minutes = row[column] if column is not None and column < len(row) else None
            if j == position:
                minutes = 0
            times.append(FALLBACK_TRAVEL_MINUTES if minutes is None else minutes)
        timed[position] = activities[position].model_copy(update={"travel_times": times})

    return timed, True


def leg_travel_time(activities: list[Activity], index: int) -> int:
    """
    Minutes from ``activities[index]`` to the next activity.

    Args:
        activities: Activities in the order their travel times were computed for
        index: Position of the leg's origin

    Returns:
        Real walking time when available, otherwise the fallback estimate
    """
    times = activities[index].travel_times
    if times and index + 1 < len(times):
        return times[index + 1]
    return FALLBACK_TRAVEL_MINUTES


def calculate_total_walking_time(activities: list[Activity]) -> int:
    """Sum of every leg between consecutive activities."""
    return sum(leg_travel_time(activities, i) for i in range(len(activities) - 1))


def calculate_total_duration(activities: list[Activity]) -> int:
    """Sum of activity durations; travel and break time are not included."""
    return sum(a.estimated_duration for a in activities)
