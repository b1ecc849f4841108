"""
Models Module - Pydantic Schemas
Data validation and type safety
"""
from .schemas import (
    # Enums
    StoreStatus,
    Urgency,

    # Records
    GeoPosition,
    Store,
    AlertNotification,

    # State
    AppState,
)

__all__ = [
    # Enums
    'StoreStatus',
    'Urgency',

    # Records
    'GeoPosition',
    'Store',
    'AlertNotification',

    # State
    'AppState',
]
