"""
Transit, walking and rideshare suggestions for the first legs of a route.
"""

import asyncio
import logging
from typing import Any

from routeplanner.core.html_utils import strip_html
from routeplanner.core.maps_service import MapsService
from routeplanner.core.schemas import Activity, TransportationOption

logger = logging.getLogger(__name__)

MAX_LEGS = 3  # Caps directions calls at 2 * MAX_LEGS per request
MAX_INSTRUCTIONS = 3
LEG_MODES = ("transit", "walking")


def rideshare_option() -> TransportationOption:
    """Catch-all rideshare estimate, independent of real data."""
    return TransportationOption(
        from_="Various locations",
        to="Various locations",
        mode="rideshare",
        estimated_cost="$8-15 per ride",
        note="Uber/Lyft available throughout the city",
    )


def _build_option(
    origin: Activity, dest: Activity, mode: str, route: dict[str, Any]
) -> TransportationOption:
    if mode == "transit":
        steps = [strip_html(step) for step in route.get("steps", [])]
        return TransportationOption(
            from_=origin.name,
            to=dest.name,
            mode="transit",
            duration=route.get("duration"),
            instructions=[step for step in steps if step][:MAX_INSTRUCTIONS] or None,
        )
    return TransportationOption(
        from_=origin.name,
        to=dest.name,
        mode="walking",
        duration=route.get("duration"),
        distance=route.get("distance"),
    )


async def get_transportation_options(
    activities: list[Activity], maps: MapsService | None
) -> list[TransportationOption]:
    """
    Look up transit and walking directions for the first few legs.

    Only legs among the first ``MAX_LEGS`` whose ends both have coordinates
    are queried. All lookups run concurrently and settle independently; a
    failed lookup is logged and contributes no option. The rideshare
    estimate is always appended last.

    Args:
        activities: Activities in optimized order
        maps: Maps service, or None to skip every lookup

    Returns:
        Options ordered by leg, transit before walking, then rideshare
    """
    lookups: list[tuple[Activity, Activity, str]] = []
    if maps is not None:
        for i in range(min(len(activities) - 1, MAX_LEGS)):
            origin, dest = activities[i], activities[i + 1]
            if origin.coordinates is None or dest.coordinates is None:
                continue
            for mode in LEG_MODES:
                lookups.append((origin, dest, mode))

    options: list[TransportationOption] = []
    if lookups:
        results = await asyncio.gather(
            *(
                asyncio.to_thread(maps.directions, origin.coordinates, dest.coordinates, mode)
                for origin, dest, mode in lookups
            ),
            return_exceptions=True,
        )

        for (origin, dest, mode), result in zip(lookups, results):
            if isinstance(result, Exception):
                logger.warning(
                    f"[Transport] Failed to get {mode} directions for "
                    f"{origin.name} to {dest.name}: {result}"
                )
                continue
            if result is None:
                continue
            options.append(_build_option(origin, dest, mode, result))

    options.append(rideshare_option())
    return options
