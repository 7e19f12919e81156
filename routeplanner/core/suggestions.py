"""
Static and destination-specific tips attached to an optimized route.
"""

from routeplanner.core.schemas import Activity

GENERAL_TIPS = [
    "Start early to avoid crowds at popular attractions",
    "Keep high-energy activities for when you're fresh",
]

# Matched by substring against the lowercased destination, first match wins
DESTINATION_TIPS: list[tuple[str, list[str]]] = [
    (
        "tokyo",
        [
            "Tokyo museums often close on Mondays",
            "Rush hours are 7-9 AM and 5-7 PM - plan accordingly",
        ],
    ),
    (
        "paris",
        [
            "Many shops close on Sundays",
            "Lunch is typically 12-2 PM, dinner after 7 PM",
        ],
    ),
    (
        "new york",
        [
            "Subway runs 24/7 but can be crowded during rush hours",
            "Many attractions offer early bird discounts",
        ],
    ),
]


def generate_optimization_suggestions(
    activities: list[Activity], destination: str, trip_day: int, weather_backup: bool
) -> list[str]:
    """Build the tip list for a route."""
    suggestions = list(GENERAL_TIPS)

    if trip_day <= 2:
        suggestions.append("Consider jet lag - schedule lighter activities for first 2 days")

    if weather_backup and any(a.weather_dependent for a in activities):
        suggestions.append("Have backup indoor options for weather-dependent activities")

    dest = destination.lower()
    for city, tips in DESTINATION_TIPS:
        if city in dest:
            suggestions.extend(tips)
            break

    high_energy_count = sum(1 for a in activities if a.energy_required == "high")
    if high_energy_count > 2:
        suggestions.append("Consider spreading high-energy activities across multiple days")

    return suggestions


def get_energy_distribution(activities: list[Activity]) -> str:
    """Summarize energy levels, e.g. "1 high, 0 medium, 2 low energy activities"."""
    counts = {"high": 0, "medium": 0, "low": 0}
    for activity in activities:
        counts[activity.energy_required] += 1
    return (
        f"{counts['high']} high, {counts['medium']} medium, "
        f"{counts['low']} low energy activities"
    )
