"""
Configuration Module for Last Call Store Finder
"""
from .settings import (
    # Upstream service
    API_KEY,
    GEMINI_MODEL,
    STORE_RESULT_COUNT,
    STORE_CATEGORY_LABEL,

    # Maps
    MAPS_SEARCH_URL,

    # Parser fallbacks
    ADDRESS_UNKNOWN,
    CLOSING_TIME_UNKNOWN,

    # Urgency
    URGENCY_HIGH_HOUR,
    URGENCY_MEDIUM_HOUR,
    URGENCY_KEYWORD,

    # Alerts
    ALERT_CHECK_INTERVAL_SECONDS,
    ALERT_WINDOW_MINUTES,
    ALERT_TITLE,
    ALERT_BODY_TEMPLATE,
    ALERT_ICON_URL,

    # Messages
    MSG_GEOLOCATION_UNSUPPORTED,
    MSG_GEOLOCATION_DENIED,
    MSG_DISCOVERY_FAILED,
    MSG_NOTIFICATIONS_DENIED,

    # Clock
    get_local_now,
)

from .logging_config import (
    setup_logging,
    get_logger,
    setup_console_logging,
)

__all__ = [
    # Upstream service
    'API_KEY',
    'GEMINI_MODEL',
    'STORE_RESULT_COUNT',
    'STORE_CATEGORY_LABEL',

    # Maps
    'MAPS_SEARCH_URL',

    # Parser fallbacks
    'ADDRESS_UNKNOWN',
    'CLOSING_TIME_UNKNOWN',

    # Urgency
    'URGENCY_HIGH_HOUR',
    'URGENCY_MEDIUM_HOUR',
    'URGENCY_KEYWORD',

    # Alerts
    'ALERT_CHECK_INTERVAL_SECONDS',
    'ALERT_WINDOW_MINUTES',
    'ALERT_TITLE',
    'ALERT_BODY_TEMPLATE',
    'ALERT_ICON_URL',

    # Messages
    'MSG_GEOLOCATION_UNSUPPORTED',
    'MSG_GEOLOCATION_DENIED',
    'MSG_DISCOVERY_FAILED',
    'MSG_NOTIFICATIONS_DENIED',

    # Clock
    'get_local_now',

    # Logging
    'setup_logging',
    'get_logger',
    'setup_console_logging',
]
