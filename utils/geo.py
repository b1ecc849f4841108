"""
Geolocation Utilities
Coordinate validation and map deep links
"""

from urllib.parse import quote

from config import MAPS_SEARCH_URL


def is_valid_latitude(lat: float) -> bool:
    return -90 <= lat <= 90


def is_valid_longitude(lon: float) -> bool:
    return -180 <= lon <= 180


def format_coordinates(lat: float, lon: float, precision: int = 6) -> str:
    """
    Format a coordinate pair for prompts and logs

    Args:
        lat: Latitude
        lon: Longitude
        precision: Decimal places to keep

    Returns:
        "lat, lon" string
    """
    return f"{lat:.{precision}f}, {lon:.{precision}f}"


def build_maps_search_url(name: str, address: str) -> str:
    """
    Build a maps text-search deep link for a store.

    The query is fully percent-encoded, so the URL never carries
    raw whitespace or user text.

    Args:
        name: Store name
        address: Store address (may be the fallback sentinel)

    Returns:
        Absolute URL like https://www.google.com/maps/search/?api=1&query=...
    """
    query = quote(f"{name} {address}", safe="")
    return f"{MAPS_SEARCH_URL}?api=1&query={query}"
