from __future__ import annotations

from autolot.ports.geocoder import GeoLocation, Geocoder

ZIP_COORDINATES: dict[str, GeoLocation] = {
    "98498": GeoLocation(lat=47.0379, lng=-122.9015, city="Lakewood", state="WA"),
    "98468": GeoLocation(lat=47.0379, lng=-122.9015, city="Lakewood", state="WA"),
    "90210": GeoLocation(lat=34.0901, lng=-118.4065, city="Beverly Hills", state="CA"),
    "10001": GeoLocation(lat=40.7505, lng=-73.9934, city="New York", state="NY"),
    "60601": GeoLocation(lat=41.8781, lng=-87.6298, city="Chicago", state="IL"),
    "75001": GeoLocation(lat=32.9483, lng=-96.7299, city="Addison", state="TX"),
    "33101": GeoLocation(lat=25.7617, lng=-80.1918, city="Miami", state="FL"),
    "77001": GeoLocation(lat=29.7604, lng=-95.3698, city="Houston", state="TX"),
    "85001": GeoLocation(lat=33.4484, lng=-112.0740, city="Phoenix", state="AZ"),
    "80201": GeoLocation(lat=39.7392, lng=-104.9903, city="Denver", state="CO"),
    "97201": GeoLocation(lat=45.5152, lng=-122.6784, city="Portland", state="OR"),
    "30301": GeoLocation(lat=33.7490, lng=-84.3880, city="Atlanta", state="GA"),
    "02101": GeoLocation(lat=42.3601, lng=-71.0589, city="Boston", state="MA"),
    "19101": GeoLocation(lat=39.9526, lng=-75.1652, city="Philadelphia", state="PA"),
    "63101": GeoLocation(lat=38.6270, lng=-90.1994, city="St. Louis", state="MO"),
    "55401": GeoLocation(lat=44.9778, lng=-93.2650, city="Minneapolis", state="MN"),
}


class StaticZipGeocoder(Geocoder):
    """Lookup table geocoder; unknown ZIPs return None."""

    def __init__(self, table: dict[str, GeoLocation] | None = None) -> None:
        self._table = ZIP_COORDINATES if table is None else table

    def lookup(self, zip_code: str) -> GeoLocation | None:
        return self._table.get(zip_code)
