"""ZIP code geocoding use cases."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from autolot.domain.errors import ValidationError
from autolot.ports.geocoder import GeoLocation, Geocoder

logger = logging.getLogger(__name__)

ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")
MAX_BATCH_SIZE = 50

# Geographic center of the contiguous US, returned for ZIPs missing from the table
FALLBACK_LOCATION = GeoLocation(
    lat=39.8283,
    lng=-98.5795,
    city="Geographic Center",
    state="US",
)


def is_valid_zip(zip_code: str) -> bool:
    return bool(ZIP_PATTERN.match(zip_code))


@dataclass(frozen=True, slots=True)
class GeocodeResult:
    zip_code: str
    location: GeoLocation | None = None
    error: str | None = None
    is_fallback: bool = False

    @property
    def success(self) -> bool:
        return self.location is not None


class GeocodeZip:
    """
    Resolve a ZIP (NNNNN or NNNNN-NNNN) to coordinates.

    Only the first five digits are used. Unknown ZIPs resolve to
    FALLBACK_LOCATION instead of failing, so radius searches always have a
    center.
    """

    def __init__(self, geocoder: Geocoder) -> None:
        self._geocoder = geocoder

    def execute(self, zip_code: str) -> GeocodeResult:
        """
        Raises:
            ValidationError: If the ZIP is malformed
        """
        if not is_valid_zip(zip_code):
            raise ValidationError(
                "Invalid ZIP code format. Use 5 digits (e.g., 98498) or 9 digits (e.g., 98498-1234)",
                errors=[
                    {
                        "field": "zip",
                        "message": "Must match NNNNN or NNNNN-NNNN",
                        "code": "INVALID_ZIP",
                    }
                ],
            )
        return self._resolve(zip_code)

    def execute_batch(self, zip_codes: list[str]) -> list[GeocodeResult]:
        """
        Resolve several ZIPs; malformed entries are reported per item.

        Raises:
            ValidationError: If the batch is empty or larger than MAX_BATCH_SIZE
        """
        if not zip_codes:
            raise ValidationError("Request must contain at least one ZIP code")
        if len(zip_codes) > MAX_BATCH_SIZE:
            raise ValidationError(f"Maximum {MAX_BATCH_SIZE} ZIP codes allowed per batch request")

        results = []
        for zip_code in zip_codes:
            if not is_valid_zip(zip_code):
                results.append(GeocodeResult(zip_code=zip_code, error="Invalid ZIP code format"))
                continue
            results.append(self._resolve(zip_code))
        return results

    def _resolve(self, zip_code: str) -> GeocodeResult:
        location = self._geocoder.lookup(zip_code[:5])
        if location is None:
            logger.info("ZIP not in lookup table, using fallback", extra={"zip": zip_code})
            return GeocodeResult(zip_code=zip_code, location=FALLBACK_LOCATION, is_fallback=True)
        return GeocodeResult(zip_code=zip_code, location=location)
