"""
Shared fakes for the host environment and the upstream client
"""

from datetime import datetime
from types import SimpleNamespace

import pytest

from core.host import PERMISSION_DEFAULT, PERMISSION_GRANTED
from models import Store, StoreStatus, Urgency
from utils import build_maps_search_url


SAMPLE_ANSWER = (
    "1. Name: Joe's Wine\n"
    "Address: 100 Main St\n"
    "Status: Open\n"
    "Closing Time: 9:00 PM\n"
    "2. Name: Ale House\n"
    "Address: 200 Oak\n"
    "Status: Closed\n"
    "Closing Time: 10:00 PM"
)


def make_store(store_id="store-0-1", name="Joe's Wine", address="100 Main St",
               status=StoreStatus.OPEN, closing_time="9:00 PM", urgency=Urgency.LOW):
    return Store(
        id=store_id,
        name=name,
        address=address,
        status=status,
        closing_time=closing_time,
        urgency=urgency,
        map_url=build_maps_search_url(name, address),
    )


class FakeGeolocation:
    """Answers synchronously with a fix, or with an error when coords is None"""

    def __init__(self, coords=(40.7128, -74.0060), error="PERMISSION_DENIED"):
        self.coords = coords
        self.error = error
        self.calls = []

    def get_current_position(self, on_success, on_error, enable_high_accuracy=True):
        self.calls.append(enable_high_accuracy)
        if self.coords is None:
            on_error(self.error)
        else:
            on_success(self.coords)


class FakeNotifier:
    def __init__(self, permission=PERMISSION_DEFAULT, grant=PERMISSION_GRANTED, fail=False):
        self.permission = permission
        self.grant = grant
        self.fail = fail
        self.sent = []
        self.permission_requests = 0

    async def request_permission(self):
        self.permission_requests += 1
        self.permission = self.grant
        return self.grant

    def notify(self, title, body, icon=None):
        if self.fail:
            raise RuntimeError("notification backend down")
        self.sent.append((title, body, icon))


class FakeDiscoveryClient:
    def __init__(self, stores=None, error=None):
        self.stores = stores or []
        self.error = error
        self.positions = []

    async def fetch_nearby_stores(self, position, now=None):
        self.positions.append(position)
        if self.error is not None:
            raise self.error
        return list(self.stores)


def make_genai_client(text=None, error=None, chunks=None):
    """Stand-in for genai.Client exposing aio.models.generate_content"""
    requests = []

    async def generate_content(model, contents, config=None):
        requests.append(SimpleNamespace(model=model, contents=contents, config=config))
        if error is not None:
            raise error
        metadata = SimpleNamespace(grounding_chunks=chunks or [])
        candidate = SimpleNamespace(grounding_metadata=metadata)
        return SimpleNamespace(text=text, candidates=[candidate])

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(
        generate_content=generate_content)))
    client.requests = requests
    return client


@pytest.fixture
def evening():
    return datetime(2026, 10, 18, 20, 45)


@pytest.fixture
def morning():
    return datetime(2026, 10, 18, 10, 0)
