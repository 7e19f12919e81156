"""
Google Maps API integration for geocoding, walking distance matrices and directions.
"""

import logging
from typing import Any

import requests

from routeplanner.core.settings import Settings, get_settings
from routeplanner.core.time_utils import seconds_to_minutes

logger = logging.getLogger(__name__)

MAPS_API_BASE = "https://maps.googleapis.com/maps/api"

Coordinates = tuple[float, float]  # (longitude, latitude)


def _latlng(coords: Coordinates) -> str:
    lng, lat = coords
    return f"{lat},{lng}"


class MapsService:
    """Service for interacting with the Google Maps web service APIs.

    Every lookup is a soft operation: a transport error, a non-OK status or a
    malformed payload is logged and reported as ``None`` so callers can fall
    back to estimates.
    """

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        if not settings.google_maps_api_key:
            raise ValueError("GOOGLE_MAPS_API_KEY not found in environment variables")
        self.api_key = settings.google_maps_api_key
        self.timeout = settings.maps_request_timeout

    def _get(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        response = requests.get(
            f"{MAPS_API_BASE}/{endpoint}/json",
            params={**params, "key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def geocode(self, address: str) -> Coordinates | None:
        """
        Geocode a free-text address to coordinates.

        Args:
            address: Address string (e.g., "Market District, Lisbon")

        Returns:
            (longitude, latitude) tuple, or None if the lookup fails or finds nothing
        """
        try:
            data = self._get("geocode", {"address": address})

            if data.get("status") != "OK" or not data.get("results"):
                logger.warning(f"[Geocode] No result for '{address}': {data.get('status')}")
                return None

            location = data["results"][0]["geometry"]["location"]
            return (float(location["lng"]), float(location["lat"]))

        except requests.RequestException as e:
            logger.warning(f"[Geocode] Request failed for '{address}': {e}")
            return None
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"[Geocode] Malformed response for '{address}': {e}")
            return None

    def walking_matrix(self, points: list[Coordinates]) -> list[list[int | None]] | None:
        """
        Fetch pairwise walking durations between points in one batched call.

        Args:
            points: Coordinates used as both origins and destinations, in order

        Returns:
            Square matrix of minutes where ``matrix[i][j]`` is the walk from
            point i to point j (None when the provider has no route for that
            pair), or None if the whole call failed
        """
        joined = "|".join(_latlng(p) for p in points)
        params = {
            "origins": joined,
            "destinations": joined,
            "mode": "walking",
            "units": "metric",
        }

        try:
            data = self._get("distancematrix", params)

            if data.get("status") != "OK":
                logger.warning(f"[DistanceMatrix] Request failed: {data.get('status')}")
                return None

            matrix: list[list[int | None]] = []
            for row in data.get("rows", []):
                minutes_row: list[int | None] = []
                for element in row.get("elements", []):
                    duration = element.get("duration")
                    if element.get("status", "OK") == "OK" and duration:
                        minutes_row.append(seconds_to_minutes(duration["value"]))
                    else:
                        minutes_row.append(None)
                matrix.append(minutes_row)
            return matrix

        except requests.RequestException as e:
            logger.warning(f"[DistanceMatrix] Request failed: {e}")
            return None
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"[DistanceMatrix] Malformed response: {e}")
            return None

    def directions(
        self, origin: Coordinates, destination: Coordinates, mode: str
    ) -> dict[str, Any] | None:
        """
        Get the first route between two points for a travel mode.

        Args:
            origin: (longitude, latitude) of the start
            destination: (longitude, latitude) of the end
            mode: Google travel mode ("transit" or "walking")

        Returns:
            Dictionary with 'duration', 'distance' display strings and the raw
            'steps' instruction markup, or None if no route was found
        """
        params = {
            "origin": _latlng(origin),
            "destination": _latlng(destination),
            "mode": mode,
        }

        try:
            data = self._get("directions", params)

            routes = data.get("routes") or []
            if not routes:
                logger.info(f"[Directions] No {mode} route: {data.get('status')}")
                return None

            leg = routes[0]["legs"][0]
            return {
                "duration": (leg.get("duration") or {}).get("text"),
                "distance": (leg.get("distance") or {}).get("text"),
                "steps": [
                    step.get("html_instructions", "") for step in leg.get("steps", [])
                ],
            }

        except requests.RequestException as e:
            logger.warning(f"[Directions] {mode} request failed: {e}")
            return None
        except (KeyError, IndexError, TypeError) as e:
            logger.warning(f"[Directions] Malformed {mode} response: {e}")
            return None


def get_maps_service() -> MapsService | None:
    """FastAPI dependency. Returns None when no API key is configured."""
    try:
        return MapsService()
    except ValueError as e:
        logger.error(f"[MapsService] {e}")
        return None
