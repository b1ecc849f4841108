"""
Prompt for the Store Finder
Asks the map-grounded model for a plain, numbered, labelled list
"""

from config import STORE_RESULT_COUNT, STORE_CATEGORY_LABEL
from utils.geo import format_coordinates

STORE_FINDER_PROMPT = """
Find the {count} closest {category} near these coordinates: {coordinates}.
Use the latest data from Google Maps.

For each store, write one numbered entry in exactly this format:

1. Name: <store name>
Address: <full street address>
Closing Time: <today's closing time, e.g. 9:00 PM>
Status: <Open or Closed right now>
Distance: <distance from the coordinates, if available>

==========================================
FORMATTING RULES - FOLLOW STRICTLY
==========================================
- Plain text only. Do NOT use markdown.
- No bold, no italics, no headings, no bullet points, no tables.
- Every field goes on its own line and starts with its label.
- Keep the fields in the order shown; Closing Time comes before Status.
- Write closing times as H:MM AM or H:MM PM.
- The Status line is only the word Open or the word Closed.
- If a store shuts within the hour, add a last line "Note: last orders soon".
- Do not add an introduction or a summary after the list.
"""


def build_store_finder_prompt(position) -> str:
    """
    Fill the store finder prompt for a location fix

    Args:
        position: GeoPosition of the user

    Returns:
        Prompt text
    """
    return STORE_FINDER_PROMPT.format(
        count=STORE_RESULT_COUNT,
        category=STORE_CATEGORY_LABEL,
        coordinates=format_coordinates(position.latitude, position.longitude),
    ).strip()
