"""
Urgency Classification
Coarse low/medium/high tint from time of day and textual cues
"""

from datetime import datetime
from typing import Optional

from config import (
    URGENCY_HIGH_HOUR,
    URGENCY_MEDIUM_HOUR,
    URGENCY_KEYWORD,
    get_local_now,
)
from models import StoreStatus, Urgency


def classify_urgency(status: StoreStatus, source_text: str = "",
                     now: Optional[datetime] = None) -> Urgency:
    """
    Assign urgency to a store.

    - Closed stores are always low
    - Open + ("soon" in the source block or hour >= 21) -> high
    - Open + hour >= 18 -> medium
    - otherwise low

    The minute-level closing check lives in the alert scheduler, not here.

    Args:
        status: Parsed store status
        source_text: The raw block the store was parsed from
        now: Reference instant (defaults to local now)

    Returns:
        Urgency level
    """
    if status == StoreStatus.CLOSED:
        return Urgency.LOW

    if now is None:
        now = get_local_now()

    mentions_soon = URGENCY_KEYWORD in (source_text or "").lower()

    if mentions_soon or now.hour >= URGENCY_HIGH_HOUR:
        return Urgency.HIGH
    if now.hour >= URGENCY_MEDIUM_HOUR:
        return Urgency.MEDIUM
    return Urgency.LOW
