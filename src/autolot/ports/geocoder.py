from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoLocation:
    lat: float
    lng: float
    city: str
    state: str


class Geocoder(ABC):
    """Port for ZIP code to coordinate lookups."""

    @abstractmethod
    def lookup(self, zip_code: str) -> GeoLocation | None:
        """Return the location for a five-digit ZIP, or None when unknown."""
        ...
