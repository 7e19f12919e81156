import pytest
from conftest import FakeMapsService
from httpx import ASGITransport, AsyncClient

from routeplanner.core.maps_service import get_maps_service
from routeplanner.main import create_app

ACTIVITIES = [
    {
        "id": "1",
        "name": "City Museum",
        "location": "Museum Quarter",
        "openingHours": "09:00-17:00",
        "estimatedDuration": 120,
        "category": "attraction",
        "crowdLevel": "medium",
        "energyRequired": "high",
        "weatherDependent": False,
        "priority": 3,
    },
    {
        "id": "2",
        "name": "Riverside Walk",
        "location": "Riverside",
        "openingHours": "06:00-20:00",
        "estimatedDuration": 60,
        "category": "activity",
        "crowdLevel": "low",
        "energyRequired": "low",
        "weatherDependent": False,
        "priority": 2,
    },
]


def _body(**overrides):
    body = {
        "activities": ACTIVITIES,
        "startTime": "09:00",
        "energyLevel": "medium",
        "includeBreaks": True,
        "weatherBackup": True,
        "destination": "Lisbon",
        "tripDay": 1,
    }
    body.update(overrides)
    return body


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_healthz_integration():
    app = create_app()
    async with _client(app) as ac:
        response = await ac.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_route_optimization_with_maps():
    maps = FakeMapsService(
        coordinates={
            "Museum Quarter, Lisbon": (-9.10, 38.70),
            "Riverside, Lisbon": (-9.12, 38.71),
        },
        matrix=[[0, 14], [13, 0]],
        routes={
            "transit": {"duration": "8 mins", "steps": ["Take <b>Tram 28</b>"]},
            "walking": {"duration": "14 mins", "distance": "1.1 km", "steps": []},
        },
    )
    app = create_app()
    app.dependency_overrides[get_maps_service] = lambda: maps

    async with _client(app) as ac:
        response = await ac.post("/route-optimization", json=_body())

    assert response.status_code == 200
    data = response.json()
    assert sorted(a["id"] for a in data["optimizedOrder"]) == ["1", "2"]
    assert data["totalDuration"] == 180
    assert data["totalWalkingTime"] == 14
    assert data["realTravelTimes"] is True
    assert data["breaks"] == []
    assert data["energyDistribution"] == "1 high, 0 medium, 1 low energy activities"
    modes = [o["mode"] for o in data["transportationOptions"]]
    assert modes == ["transit", "walking", "rideshare"]
    assert data["transportationOptions"][0]["instructions"] == ["Take Tram 28"]
    assert data["transportationOptions"][0]["from"] == data["optimizedOrder"][0]["name"]


@pytest.mark.asyncio
async def test_route_optimization_missing_api_key():
    app = create_app()
    app.dependency_overrides[get_maps_service] = lambda: None

    async with _client(app) as ac:
        response = await ac.post("/route-optimization", json=_body())

    assert response.status_code == 500
    assert response.json() == {"error": "Google Maps API key not configured"}


@pytest.mark.asyncio
async def test_route_optimization_unexpected_error(monkeypatch):
    from routeplanner.api.routers import routes

    async def broken(payload, maps):
        raise RuntimeError("boom")

    monkeypatch.setattr(routes, "optimize_route", broken)
    app = create_app()
    app.dependency_overrides[get_maps_service] = lambda: FakeMapsService()

    async with _client(app) as ac:
        response = await ac.post("/route-optimization", json=_body())

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to optimize route"}


@pytest.mark.asyncio
async def test_route_optimization_rejects_malformed_body():
    app = create_app()
    app.dependency_overrides[get_maps_service] = lambda: FakeMapsService()
    bad_activity = dict(ACTIVITIES[0], energyRequired="extreme")

    async with _client(app) as ac:
        bad_enum = await ac.post("/route-optimization", json=_body(activities=[bad_activity]))
        bad_time = await ac.post("/route-optimization", json=_body(startTime="9am"))
        duplicate = await ac.post(
            "/route-optimization", json=_body(activities=[ACTIVITIES[0], ACTIVITIES[0]])
        )
        blank_id = await ac.post(
            "/route-optimization", json=_body(activities=[dict(ACTIVITIES[0], id="   ")])
        )

    for response in (bad_enum, bad_time, duplicate, blank_id):
        assert response.status_code == 422
        assert response.json()["error"] == "Invalid request"


@pytest.mark.asyncio
async def test_local_route_optimization_uses_estimates():
    app = create_app()
    async with _client(app) as ac:
        response = await ac.post("/route-optimization/local", json=_body(includeBreaks=False))

    assert response.status_code == 200
    data = response.json()
    assert data["totalWalkingTime"] == 15
    assert data["realTravelTimes"] is False
    assert data["breaks"] == []
    assert [o["mode"] for o in data["transportationOptions"]] == ["rideshare"]


@pytest.mark.asyncio
async def test_export_route():
    app = create_app()
    async with _client(app) as ac:
        optimized = (await ac.post("/route-optimization/local", json=_body())).json()
        response = await ac.post(
            "/route-optimization/export",
            json={"optimization": optimized, "startTime": "09:00", "date": "2024-06-01"},
        )

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2024-06-01"
    first_duration = optimized["optimizedOrder"][0]["estimatedDuration"]
    second_start = 9 * 60 + first_duration + 15
    assert [s["time"] for s in data["activities"]] == [
        "09:00",
        f"{second_start // 60:02d}:{second_start % 60:02d}",
    ]
    assert data["totalTime"] == "3h 0m"
    assert data["walkingTime"] == "15 minutes"


@pytest.mark.asyncio
async def test_activity_catalog():
    app = create_app()
    async with _client(app) as ac:
        response = await ac.post(
            "/activities/catalog", json={"destination": "Lisbon", "interests": ["Food"]}
        )

    assert response.status_code == 200
    data = response.json()
    assert [a["name"] for a in data] == ["Lisbon Food District"]
    assert data[0]["estimatedDuration"] == 120
    assert data[0]["category"] == "restaurant"
