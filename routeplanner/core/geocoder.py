"""
Resolve activity locations to coordinates before travel times are looked up.
"""

import asyncio
import logging

from routeplanner.core.maps_service import Coordinates, MapsService
from routeplanner.core.schemas import Activity

logger = logging.getLogger(__name__)


def geocode_address(activity: Activity, destination: str) -> str:
    """Address sent to the geocoder, e.g. "Market District, Lisbon"."""
    parts = [part for part in (activity.location, destination) if part]
    return ", ".join(parts)


async def geocode_activities(
    activities: list[Activity], destination: str, maps: MapsService
) -> list[Activity]:
    """
    Fill in coordinates for activities that have none.

    Lookups run in parallel worker threads and are settled independently:
    a failed lookup leaves its activity without coordinates and never
    affects the others.

    Args:
        activities: Activities in any order (not modified)
        destination: Destination appended to each location for context
        maps: Maps service used for the lookups

    Returns:
        New list in the same order, with coordinates where a lookup succeeded
    """
    addresses = sorted(
        {
            geocode_address(a, destination)
            for a in activities
            if a.coordinates is None and geocode_address(a, destination)
        }
    )
    if not addresses:
        return list(activities)

    results = await asyncio.gather(
        *(asyncio.to_thread(maps.geocode, address) for address in addresses),
        return_exceptions=True,
    )

    resolved: dict[str, Coordinates] = {}
    for address, result in zip(addresses, results):
        if isinstance(result, Exception):
            logger.warning(f"[Geocode] Lookup for '{address}' raised: {result}")
        elif result is not None:
            resolved[address] = result

    logger.info(f"[Geocode] Resolved {len(resolved)}/{len(addresses)} locations")

    geocoded = []
    for activity in activities:
        coords = resolved.get(geocode_address(activity, destination))
        if activity.coordinates is None and coords is not None:
            activity = activity.model_copy(update={"coordinates": coords})
        geocoded.append(activity)
    return geocoded
