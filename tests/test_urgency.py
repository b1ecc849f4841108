from datetime import datetime

import pytest

from core.urgency import classify_urgency
from models import StoreStatus, Urgency


def at(hour):
    return datetime(2026, 10, 18, hour, 0)


@pytest.mark.parametrize("hour,expected", [
    (10, Urgency.LOW),
    (17, Urgency.LOW),
    (18, Urgency.MEDIUM),
    (19, Urgency.MEDIUM),
    (21, Urgency.HIGH),
    (23, Urgency.HIGH),
])
def test_open_by_hour(hour, expected):
    assert classify_urgency(StoreStatus.OPEN, "Status: Open", now=at(hour)) == expected


def test_soon_keyword_is_high_any_time():
    assert classify_urgency(StoreStatus.OPEN, "Status: Closing SOON", now=at(9)) == Urgency.HIGH


def test_closed_is_always_low():
    assert classify_urgency(StoreStatus.CLOSED, "closing soon", now=at(22)) == Urgency.LOW
