"""
Insert rest and meal breaks along an optimized route.
"""

from datetime import timedelta

from routeplanner.core.schemas import Activity, BreakSuggestion
from routeplanner.core.time_utils import clock_from_start, format_clock_12h
from routeplanner.core.travel_times import leg_travel_time

ENERGY_POINTS = {"high": 3, "medium": 2, "low": 1}
ENERGY_BREAK_THRESHOLD = 6
BREAK_EVERY_N_ACTIVITIES = 3
LUNCH_HOURS = range(12, 15)  # 12:00-14:59

FOOD_BREAK_MINUTES = 60
REST_BREAK_MINUTES = 20


def generate_smart_breaks(
    activities: list[Activity],
    start_time: str,
    energy_level: str,
    include_breaks: bool,
) -> list[BreakSuggestion]:
    """
    Walk the route once and suggest breaks.

    After each activity (except the first) a break is suggested when the
    accumulated energy reaches the threshold or every third activity. The
    energy counter resets after each break. A break falling in the lunch
    window is a meal break.

    Args:
        activities: Activities in optimized order
        start_time: Day start in "HH:MM"
        energy_level: Traveler's energy level; accepted for interface parity
        include_breaks: When False no breaks are suggested

    Returns:
        Break suggestions in route order
    """
    if not include_breaks:
        return []

    breaks: list[BreakSuggestion] = []
    current_time = clock_from_start(start_time)
    energy_spent = 0

    for index, activity in enumerate(activities):
        current_time += timedelta(minutes=activity.estimated_duration)
        energy_spent += ENERGY_POINTS[activity.energy_required]

        if index > 0 and (
            energy_spent >= ENERGY_BREAK_THRESHOLD or index % BREAK_EVERY_N_ACTIVITIES == 0
        ):
            is_food = current_time.hour in LUNCH_HOURS
            breaks.append(
                BreakSuggestion(
                    time=format_clock_12h(current_time),
                    type="food" if is_food else "rest",
                    location="Local restaurant or cafe" if is_food else "Nearby park or rest area",
                    reason=(
                        "High energy expenditure"
                        if energy_spent >= ENERGY_BREAK_THRESHOLD
                        else "Regular rest interval"
                    ),
                    duration=FOOD_BREAK_MINUTES if is_food else REST_BREAK_MINUTES,
                )
            )
            energy_spent = 0

        current_time += timedelta(minutes=leg_travel_time(activities, index))

    return breaks
