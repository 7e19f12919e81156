"""
Rule-based activity scheduling: adjusts priorities and notes, then orders the day.
"""

from datetime import date

from routeplanner.core.schemas import Activity

MONDAY = 0  # date.weekday()

CROWD_AVOIDANCE_TIMES = ["08:00-10:00", "16:00-18:00"]

# Keyword groups matched against the lowercased destination, first match wins
MEAL_TIMES_BY_DESTINATION: list[tuple[tuple[str, ...], list[str]]] = [
    (("spain", "madrid", "barcelona"), ["14:00-16:00", "21:00-23:00"]),  # Late lunch and dinner
    (("japan", "tokyo"), ["11:30-13:30", "18:00-20:00"]),  # Earlier dinner
    (("italy", "rome", "milan"), ["12:30-14:30", "19:30-21:30"]),
]
DEFAULT_MEAL_TIMES = ["12:00-14:00", "18:00-20:00"]


def get_meal_times_for_destination(destination: str) -> list[str]:
    """
    Get typical lunch and dinner windows for a destination.

    Args:
        destination: Free-text destination (e.g., "Madrid, Spain")

    Returns:
        Two "HH:MM-HH:MM" windows: lunch, then dinner
    """
    dest = destination.lower()
    for keywords, meal_times in MEAL_TIMES_BY_DESTINATION:
        if any(keyword in dest for keyword in keywords):
            return list(meal_times)
    return list(DEFAULT_MEAL_TIMES)


def _schedule_activity(
    activity: Activity, destination: str, trip_day: int, is_monday: bool
) -> Activity:
    # Museums commonly close on Mondays
    if activity.category == "attraction" and "museum" in activity.name.lower() and is_monday:
        return activity.model_copy(
            deep=True,
            update={"priority": activity.priority - 2, "notes": "Avoid Mondays - may be closed"},
        )

    updated = activity.model_copy(deep=True)

    if updated.category == "restaurant":
        updated.suggested_times = get_meal_times_for_destination(destination)

    # First days of a trip: jet lag makes demanding activities harder
    if trip_day <= 2 and updated.energy_required == "high":
        return updated.model_copy(
            update={
                "priority": updated.priority - 1,
                "notes": "Consider jet lag - might be more tiring",
            }
        )

    if updated.crowd_level == "high" and updated.category == "attraction":
        updated.suggested_times = list(CROWD_AVOIDANCE_TIMES)
        updated.notes = "Best visited early morning or late afternoon to avoid crowds"

    return updated


def apply_smart_scheduling(
    activities: list[Activity],
    start_time: str,
    destination: str,
    trip_day: int,
    today: date | None = None,
) -> list[Activity]:
    """
    Apply the fixed scheduling rules and sort the day.

    Rules (first two matching rules stop further adjustments):
        - Museum attractions on a Monday lose 2 priority points
        - Restaurants get destination-specific meal windows
        - High-energy activities on trip days 1-2 lose 1 priority point (jet lag)
        - Crowded attractions get early-morning/late-afternoon windows

    Weather-dependent activities are ordered first, then by descending priority.

    Args:
        activities: Activities for the day (not modified)
        start_time: Day start in "HH:MM"; accepted for interface parity, unused by the rules
        destination: Free-text destination
        trip_day: 1-based day index within the trip
        today: Date whose weekday drives the Monday rule; defaults to the
            server's current date

    Returns:
        New list of adjusted activity copies in scheduled order
    """
    today = today or date.today()
    is_monday = today.weekday() == MONDAY

    scheduled = [
        _schedule_activity(activity, destination, trip_day, is_monday) for activity in activities
    ]
    # sorted() is stable, so equal keys keep their input order
    return sorted(scheduled, key=lambda a: (not a.weather_dependent, -a.priority))
