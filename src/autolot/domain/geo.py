"""Great-circle distance helpers for radius searches."""

from __future__ import annotations

import math
from dataclasses import dataclass

from autolot.domain.errors import FilterValidationError
from autolot.domain.vehicle import Vehicle

EARTH_RADIUS_MILES = 3958.8


def haversine_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance in miles between two (lat, lng) points given in degrees."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Clamp: rounding can push `a` a hair above 1 for antipodal points
    a = min(1.0, max(0.0, a))

    return 2 * EARTH_RADIUS_MILES * math.asin(math.sqrt(a))


@dataclass(frozen=True, slots=True)
class RadiusFilter:
    latitude: float
    longitude: float
    radius_miles: float

    def validate(self) -> None:
        """
        Validate the search center and radius.

        Raises:
            FilterValidationError: If coordinates are out of range or radius is negative
        """
        if not -90 <= self.latitude <= 90:
            raise FilterValidationError("lat must be between -90 and 90")
        if not -180 <= self.longitude <= 180:
            raise FilterValidationError("lng must be between -180 and 180")
        if self.radius_miles < 0:
            raise FilterValidationError("radius must be >= 0")

    def distance_to(self, vehicle: Vehicle) -> float | None:
        """Miles from the center to the vehicle's seller, or None without coordinates."""
        location = vehicle.location
        if location.latitude is None or location.longitude is None:
            return None
        return haversine_miles(
            self.latitude, self.longitude, location.latitude, location.longitude
        )

    def contains(self, distance: float | None) -> bool:
        # Boundary is inclusive
        return distance is not None and distance <= self.radius_miles
