"""
Main Entry Point for the Last Call Store Finder
Builds a StoreFinder for a UI host
"""
from typing import Optional

from config import GEMINI_MODEL, setup_console_logging
from core import StoreDiscoveryClient, StoreFinder


def create_store_finder(geolocation=None, notifications=None,
                        api_key: Optional[str] = None,
                        model: str = GEMINI_MODEL,
                        quiet_logging: bool = True) -> StoreFinder:
    """
    Wire a StoreFinder against the real Gemini client

    Args:
        geolocation: Host GeolocationProvider (None = unsupported)
        notifications: Host NotificationCenter (None = unsupported)
        api_key: Gemini API key (defaults to API_KEY)
        model: Gemini model id
        quiet_logging: Configure console-only WARNING logging

    Returns:
        StoreFinder ready for request_position() / refresh()

    Example:
        >>> finder = create_store_finder(geolocation=browser_geo)
        >>> await finder.refresh()
        >>> finder.sorted_stores
    """
    if quiet_logging:
        setup_console_logging()

    client = StoreDiscoveryClient(api_key=api_key, model=model)
    return StoreFinder(client, geolocation=geolocation, notifications=notifications)


__all__ = ['create_store_finder']
