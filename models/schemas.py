"""
Pydantic Models for Store Discovery
Data validation and schema definitions
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from utils.geo import is_valid_latitude, is_valid_longitude


class StoreStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"
    CLOSING_SOON = "Closing Soon"


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GeoPosition(BaseModel):
    """
    A location fix reported by the host. Replaced on refresh, never mutated.
    """
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")

    @field_validator('latitude')
    @classmethod
    def validate_latitude(cls, v):
        """Validate latitude is in valid range"""
        if not is_valid_latitude(v):
            raise ValueError('Latitude must be between -90 and 90')
        return v

    @field_validator('longitude')
    @classmethod
    def validate_longitude(cls, v):
        """Validate longitude is in valid range"""
        if not is_valid_longitude(v):
            raise ValueError('Longitude must be between -180 and 180')
        return v

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [{
                "latitude": 40.7128,
                "longitude": -74.0060
            }]
        }
    }


class Store(BaseModel):
    """
    Single store parsed from the upstream answer
    """
    id: str = Field(..., description="Batch-unique id, not a persistent key")
    name: str = Field(..., description="Display name without labels or markdown")
    address: str = Field(..., description="Display address or fallback sentinel")
    status: StoreStatus = Field(..., description="Open or Closed as reported upstream")
    closing_time: str = Field(..., description="'H:MM AM|PM' or fallback sentinel")
    urgency: Urgency = Field(Urgency.LOW, description="Coarse urgency for UI tinting")
    map_url: str = Field(..., description="Maps text-search deep link")
    distance: Optional[str] = Field(None, description="Distance as reported upstream")

    @field_validator('name')
    @classmethod
    def name_long_enough(cls, v):
        """Validate name has more than one character"""
        if not v or len(v.strip()) <= 1:
            raise ValueError('Store name must be longer than one character')
        return v.strip()

    @property
    def display_status(self) -> StoreStatus:
        """Status label for the UI; open + high urgency reads as Closing Soon"""
        if self.status == StoreStatus.OPEN and self.urgency == Urgency.HIGH:
            return StoreStatus.CLOSING_SOON
        return self.status

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "id": "store-1-1700000000000",
                "name": "Joe's Wine",
                "address": "100 Main St",
                "status": "Open",
                "closing_time": "9:00 PM",
                "urgency": "medium",
                "map_url": "https://www.google.com/maps/search/?api=1&query=Joe%27s%20Wine%20100%20Main%20St",
                "distance": "0.4 miles"
            }]
        }
    }


class AlertNotification(BaseModel):
    """
    A closing alert handed to the host notification center
    """
    store_id: str = Field(..., description="Id of the store the alert is about")
    title: str = Field(..., description="Notification title")
    body: str = Field(..., description="Notification body")
    icon: Optional[str] = Field(None, description="Icon URL")


class AppState(BaseModel):
    """
    Orchestration state published to the UI
    """
    stores: List[Store] = Field(default_factory=list, description="Latest successful batch")
    loading: bool = Field(False, description="True while a fix or discovery is in flight")
    error: Optional[str] = Field(None, description="At most one user-facing message")
    position: Optional[GeoPosition] = Field(None, description="Latest location fix")
    alerts_enabled: bool = Field(False, description="User opted in to closing alerts")
