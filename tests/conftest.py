from typing import Any

import pytest

from routeplanner.core.schemas import Activity


def make_activity(activity_id: str, name: str, **overrides: Any) -> Activity:
    fields: dict[str, Any] = {
        "location": f"{name} Street",
        "opening_hours": "09:00-17:00",
        "estimated_duration": 60,
        "category": "activity",
        "crowd_level": "medium",
        "energy_required": "medium",
        "weather_dependent": False,
        "priority": 1,
    }
    fields.update(overrides)
    return Activity(id=activity_id, name=name, **fields)


class FakeMapsService:
    """In-memory stand-in for MapsService with scripted responses."""

    def __init__(
        self,
        coordinates: dict[str, tuple[float, float]] | None = None,
        matrix: list[list[int | None]] | None = None,
        routes: dict[str, dict[str, Any]] | None = None,
        failing_addresses: set[str] | None = None,
        matrix_error: Exception | None = None,
        failing_modes: set[str] | None = None,
    ):
        self.coordinates = coordinates or {}
        self.matrix = matrix
        self.routes = routes or {}
        self.failing_addresses = failing_addresses or set()
        self.matrix_error = matrix_error
        self.failing_modes = failing_modes or set()
        self.geocode_calls: list[str] = []
        self.matrix_calls: list[list[tuple[float, float]]] = []
        self.directions_calls: list[tuple[tuple[float, float], tuple[float, float], str]] = []

    def geocode(self, address: str) -> tuple[float, float] | None:
        self.geocode_calls.append(address)
        if address in self.failing_addresses:
            raise RuntimeError(f"geocoder exploded for {address}")
        return self.coordinates.get(address)

    def walking_matrix(self, points: list[tuple[float, float]]) -> list[list[int | None]] | None:
        self.matrix_calls.append(points)
        if self.matrix_error is not None:
            raise self.matrix_error
        return self.matrix

    def directions(
        self, origin: tuple[float, float], destination: tuple[float, float], mode: str
    ) -> dict[str, Any] | None:
        self.directions_calls.append((origin, destination, mode))
        if mode in self.failing_modes:
            raise RuntimeError(f"{mode} directions unavailable")
        return self.routes.get(mode)


@pytest.fixture
def fake_maps() -> FakeMapsService:
    return FakeMapsService()
