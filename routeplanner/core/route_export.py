"""
Printable timetable for an optimized route.
"""

from datetime import date

from routeplanner.core.schemas import ExportedStop, RouteExport, RouteOptimization
from routeplanner.core.time_utils import format_duration, format_hhmm, parse_time_to_minutes
from routeplanner.core.travel_times import FALLBACK_TRAVEL_MINUTES


def export_route(
    optimization: RouteOptimization, start_time: str, export_date: str | None = None
) -> RouteExport:
    """
    Lay out an optimized route as a timetable.

    Arrival times assume a fixed travel estimate between stops so the
    timetable matches what travellers see on the itinerary card.

    Args:
        optimization: Route envelope from an optimization run
        start_time: Day start in "HH:MM"
        export_date: Display date; defaults to today's ISO date

    Returns:
        Timetable with one entry per stop plus the route's breaks and totals
    """
    clock = parse_time_to_minutes(start_time)
    stops: list[ExportedStop] = []

    for order, activity in enumerate(optimization.optimized_order, start=1):
        stops.append(
            ExportedStop(
                order=order,
                time=format_hhmm(clock),
                name=activity.name,
                location=activity.location,
                duration=f"{activity.estimated_duration} minutes",
                notes="Weather dependent" if activity.weather_dependent else "",
            )
        )
        clock += activity.estimated_duration + FALLBACK_TRAVEL_MINUTES

    return RouteExport(
        date=export_date or date.today().isoformat(),
        start_time=start_time,
        activities=stops,
        breaks=optimization.breaks,
        total_time=format_duration(optimization.total_duration),
        walking_time=f"{optimization.total_walking_time} minutes",
    )
