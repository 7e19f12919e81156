"""
Template activities derived from a trip's interests.
"""

from routeplanner.core.schemas import Activity


def _activity(destination: str, activity_id: str, suffix: str, **fields) -> Activity:
    name = f"{destination} {suffix}" if destination else suffix
    return Activity(id=activity_id, name=name, **fields)


def build_activity_catalog(destination: str, interests: list[str]) -> list[Activity]:
    """
    Build candidate activities for a trip day from interest tags.

    Args:
        destination: Destination name used to label the activities
        interests: Lowercased interest tags (e.g., ["cultural", "food"])

    Returns:
        Template activities; two generic ones when no interest matches
    """
    tags = set(interests)
    catalog: list[Activity] = []

    if "cultural" in tags:
        catalog.append(
            _activity(
                destination,
                "1",
                "Historical Center",
                location="City Center",
                opening_hours="09:00-17:00",
                estimated_duration=120,
                category="attraction",
                crowd_level="medium",
                energy_required="low",
                weather_dependent=False,
                priority=1,
            )
        )
        catalog.append(
            _activity(
                destination,
                "2",
                "Local Market",
                location="Market District",
                opening_hours="08:00-14:00",
                estimated_duration=90,
                category="attraction",
                crowd_level="high",
                energy_required="medium",
                weather_dependent=False,
                priority=2,
            )
        )

    if tags & {"nature", "adventure"}:
        catalog.append(
            _activity(
                destination,
                "3",
                "Nature Trail",
                location="Natural Area",
                opening_hours="06:00-18:00",
                estimated_duration=180,
                category="activity",
                crowd_level="low",
                energy_required="high",
                weather_dependent=True,
                priority=1,
            )
        )
        catalog.append(
            _activity(
                destination,
                "4",
                "Scenic Viewpoint",
                location="Elevated Area",
                opening_hours="06:00-20:00",
                estimated_duration=60,
                category="attraction",
                crowd_level="medium",
                energy_required="medium",
                weather_dependent=True,
                priority=1,
            )
        )

    if tags & {"food", "culinary"}:
        catalog.append(
            _activity(
                destination,
                "5",
                "Food District",
                location="Culinary Quarter",
                opening_hours="11:00-22:00",
                estimated_duration=120,
                category="restaurant",
                crowd_level="high",
                energy_required="low",
                weather_dependent=False,
                priority=1,
            )
        )

    # Default activities if no specific interests
    if not catalog:
        catalog = [
            _activity(
                destination,
                "1",
                "Main Attraction",
                location="City Center",
                opening_hours="09:00-17:00",
                estimated_duration=120,
                category="attraction",
                crowd_level="medium",
                energy_required="low",
                weather_dependent=False,
                priority=1,
            ),
            _activity(
                destination,
                "2",
                "Walking Area",
                location="Historic District",
                opening_hours="08:00-20:00",
                estimated_duration=90,
                category="activity",
                crowd_level="medium",
                energy_required="medium",
                weather_dependent=False,
                priority=2,
            ),
        ]

    return catalog
