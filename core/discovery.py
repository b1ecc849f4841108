"""
Store Discovery Client
Map-grounded Gemini request for nearby stores, parsed into Store records
"""

from datetime import datetime
from typing import List, Optional

from google import genai
from google.genai import types as genai_types

from config import API_KEY, GEMINI_MODEL, get_logger
from errors import DiscoveryFailed
from models import GeoPosition, Store
from prompt import build_store_finder_prompt
from core.parser import parse_store_response

logger = get_logger(__name__)


def build_generate_content_config(position: GeoPosition) -> genai_types.GenerateContentConfig:
    """
    Enable Google Maps grounding, anchored on the user's position.
    """
    return genai_types.GenerateContentConfig(
        tools=[genai_types.Tool(google_maps=genai_types.GoogleMaps())],
        tool_config=genai_types.ToolConfig(
            retrieval_config=genai_types.RetrievalConfig(
                lat_lng=genai_types.LatLng(
                    latitude=position.latitude,
                    longitude=position.longitude,
                )
            )
        ),
    )


def extract_grounding_chunks(response) -> list:
    """Grounding chunks of the first candidate, or [] when absent"""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    if metadata is None:
        return []
    return list(getattr(metadata, "grounding_chunks", None) or [])


class StoreDiscoveryClient:
    """
    Stateless client: every call issues a fresh request, nothing is cached.
    """

    def __init__(self, api_key: Optional[str] = None, model: str = GEMINI_MODEL,
                 client=None):
        """
        Args:
            api_key: Gemini API key (defaults to API_KEY from the environment)
            model: Model identifier
            client: Pre-built genai.Client (mainly for tests)
        """
        self._api_key = api_key or API_KEY
        self._client = client
        self.model = model

    def _get_client(self):
        """Build the genai client on first use; a missing key fails here"""
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def fetch_nearby_stores(self, position: GeoPosition,
                                  now: Optional[datetime] = None) -> List[Store]:
        """
        Ask the upstream model for the closest stores and parse the answer.

        Args:
            position: User location fix
            now: Reference instant for urgency (defaults to local now)

        Returns:
            Stores in upstream order (may be empty if nothing parsed)

        Raises:
            DiscoveryFailed: on any upstream failure or an empty answer
        """
        logger.info(
            "Fetching nearby stores near %.3f, %.3f with %s",
            position.latitude, position.longitude, self.model
        )

        try:
            client = self._get_client()
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=build_store_finder_prompt(position),
                config=build_generate_content_config(position),
            )
        except Exception as e:
            logger.exception("Error fetching stores from Gemini")
            raise DiscoveryFailed() from e

        text = getattr(response, "text", None) or ""
        if not text.strip():
            logger.error("Gemini returned an empty answer")
            raise DiscoveryFailed()

        return parse_store_response(text, extract_grounding_chunks(response), now=now)
