"""
Error Types for Last Call Store Finder
Each error carries the message shown to the user
"""

from config import (
    MSG_GEOLOCATION_UNSUPPORTED,
    MSG_GEOLOCATION_DENIED,
    MSG_DISCOVERY_FAILED,
    MSG_NOTIFICATIONS_DENIED,
)


class LastCallError(Exception):
    """Base error; str(error) is safe to show in the UI"""

    default_message = "Something went wrong."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class GeolocationUnsupported(LastCallError):
    default_message = MSG_GEOLOCATION_UNSUPPORTED


class GeolocationDenied(LastCallError):
    default_message = MSG_GEOLOCATION_DENIED


class DiscoveryFailed(LastCallError):
    """Any upstream failure or empty answer. The cause is logged, not shown."""

    default_message = MSG_DISCOVERY_FAILED


class NotificationDenied(LastCallError):
    default_message = MSG_NOTIFICATIONS_DENIED


class TimeUnparseable(LastCallError, ValueError):
    """Raised when a clock string like '9:00 PM' can't be decoded"""

    default_message = "Time is not parseable."
