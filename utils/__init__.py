"""
Utilities Module - Helper Functions
"""
from .text import (
    shorten,
    clean_text,
    strip_markdown,
)

from .geo import (
    is_valid_latitude,
    is_valid_longitude,
    format_coordinates,
    build_maps_search_url,
)

from .hours import (
    parse_clock_time,
    minutes_until,
)

__all__ = [
    # Text utilities
    'shorten',
    'clean_text',
    'strip_markdown',

    # Geo utilities
    'is_valid_latitude',
    'is_valid_longitude',
    'format_coordinates',
    'build_maps_search_url',

    # Hours utilities
    'parse_clock_time',
    'minutes_until',
]
