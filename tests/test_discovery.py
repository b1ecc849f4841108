import asyncio
from datetime import datetime

import pytest

from config import MSG_DISCOVERY_FAILED
from core.discovery import StoreDiscoveryClient, build_generate_content_config
from errors import DiscoveryFailed
from models import GeoPosition
from conftest import SAMPLE_ANSWER, make_genai_client

POSITION = GeoPosition(latitude=40.7128, longitude=-74.0060)
NOON = datetime(2026, 10, 18, 12, 0)


def test_request_is_map_grounded():
    client = make_genai_client(text=SAMPLE_ANSWER)
    discovery = StoreDiscoveryClient(model="gemini-test", client=client)

    stores = asyncio.run(discovery.fetch_nearby_stores(POSITION, now=NOON))

    assert [s.name for s in stores] == ["Joe's Wine", "Ale House"]
    request = client.requests[0]
    assert request.model == "gemini-test"
    assert "40.712800, -74.006000" in request.contents
    assert "Do NOT use markdown" in request.contents
    assert request.config.tools[0].google_maps is not None
    lat_lng = request.config.tool_config.retrieval_config.lat_lng
    assert (lat_lng.latitude, lat_lng.longitude) == (40.7128, -74.0060)


def test_each_call_is_a_fresh_request():
    client = make_genai_client(text=SAMPLE_ANSWER)
    discovery = StoreDiscoveryClient(client=client)
    asyncio.run(discovery.fetch_nearby_stores(POSITION, now=NOON))
    asyncio.run(discovery.fetch_nearby_stores(POSITION, now=NOON))
    assert len(client.requests) == 2


def test_upstream_error_is_wrapped():
    client = make_genai_client(error=ConnectionError("quota exceeded"))
    discovery = StoreDiscoveryClient(client=client)

    with pytest.raises(DiscoveryFailed) as exc_info:
        asyncio.run(discovery.fetch_nearby_stores(POSITION))

    assert str(exc_info.value) == MSG_DISCOVERY_FAILED
    assert "quota" not in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.parametrize("text", [None, "", "   \n"])
def test_empty_answer_fails(text):
    discovery = StoreDiscoveryClient(client=make_genai_client(text=text))
    with pytest.raises(DiscoveryFailed):
        asyncio.run(discovery.fetch_nearby_stores(POSITION))


def test_unparseable_answer_is_empty_not_error():
    discovery = StoreDiscoveryClient(client=make_genai_client(text="No stores nearby."))
    assert asyncio.run(discovery.fetch_nearby_stores(POSITION, now=NOON)) == []


def test_config_builder():
    config = build_generate_content_config(POSITION)
    assert config.tool_config.retrieval_config.lat_lng.latitude == 40.7128


def test_missing_api_key_fails_at_request_time(monkeypatch):
    import core.discovery as discovery_module

    def client_without_key(api_key=None):
        raise ValueError("No API key was provided")

    monkeypatch.setattr(discovery_module, "API_KEY", None)
    monkeypatch.setattr(discovery_module.genai, "Client", client_without_key)

    discovery = StoreDiscoveryClient()

    with pytest.raises(DiscoveryFailed) as exc_info:
        asyncio.run(discovery.fetch_nearby_stores(POSITION))

    assert str(exc_info.value) == MSG_DISCOVERY_FAILED
    assert isinstance(exc_info.value.__cause__, ValueError)
