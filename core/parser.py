"""
Store Response Parser
Recovers store records from the free-form answer of the map-grounded model.

The answer is plain text that *usually* looks like:

    1. Name: Joe's Wine
    Address: 100 Main St
    Status: Open
    Closing Time: 9:00 PM

but the model drifts (markdown residue, missing labels, preambles), so
parsing is recovery oriented: partial records get sentinels instead of
failing the batch.
"""

import re
import time
from datetime import datetime
from typing import List, Optional, Sequence, Any

from config import ADDRESS_UNKNOWN, CLOSING_TIME_UNKNOWN, get_local_now, get_logger
from models import Store, StoreStatus
from utils import strip_markdown, clean_text, build_maps_search_url, shorten
from core.urgency import classify_urgency

logger = get_logger(__name__)

BLOCK_SEPARATOR_PATTERN = re.compile(r'\d+\.\s+')
NAME_LABEL_PATTERN = re.compile(r'^(store\s+)?name:\s*', re.IGNORECASE)
BULLET_PATTERN = re.compile(r'^[-•·]+\s*')

# field -> (keywords that select a line, label stripped when there's no colon)
FIELD_RULES = {
    'address': (
        ('address',),
        re.compile(r'^(full\s+)?address\b[\s\-–]*', re.IGNORECASE),
    ),
    'closing_time': (
        ('closing', 'time'),
        re.compile(r"^(today'?s\s+)?(closing\s+time|closing|time)\b[\s\-–]*", re.IGNORECASE),
    ),
    'status': (
        ('status',),
        re.compile(r'^(current\s+)?status\b[\s\-–]*', re.IGNORECASE),
    ),
    'distance': (
        ('distance',),
        re.compile(r'^distance\b[\s\-–]*', re.IGNORECASE),
    ),
}


def split_store_blocks(text: str) -> List[str]:
    """
    Split cleaned text into one block per numbered entry.

    Anything before the first "N. " marker is preamble and is dropped.
    Text without any marker is treated as a single block.
    """
    parts = BLOCK_SEPARATOR_PATTERN.split(text)
    if len(parts) > 1:
        parts = parts[1:]
    return [part for part in parts if part.strip()]


def extract_field(lines: Sequence[str], field: str) -> Optional[str]:
    """
    Find the value of a labelled field.

    The first line containing one of the field's keywords wins. With a
    colon, the value is everything after the first colon; otherwise the
    leading label is stripped.

    Args:
        lines: Trimmed, non-empty lines of a block (name line excluded)
        field: One of FIELD_RULES

    Returns:
        The value, or None if no line matched or the value is empty
    """
    keywords, label_pattern = FIELD_RULES[field]

    for line in lines:
        line_lower = line.lower()
        if not any(keyword in line_lower for keyword in keywords):
            continue

        line = BULLET_PATTERN.sub('', line)
        if ':' in line:
            value = ':'.join(line.split(':')[1:]).strip()
        else:
            value = label_pattern.sub('', line).strip()
        return value or None

    return None


def decode_status(status_text: Optional[str]) -> StoreStatus:
    if status_text and 'closed' in status_text.lower():
        return StoreStatus.CLOSED
    return StoreStatus.OPEN


def parse_store_block(block: str, index: int, batch_millis: int,
                      now: Optional[datetime] = None) -> Optional[Store]:
    """
    Build one Store from a block, or None if the block is unusable
    """
    lines = [line.strip() for line in block.splitlines()]
    lines = [line for line in lines if line]

    if len(lines) < 2:
        return None

    name = BULLET_PATTERN.sub('', lines[0])
    name = clean_text(NAME_LABEL_PATTERN.sub('', name))
    if len(name) <= 1:
        logger.debug("Dropping block %d without a usable name: %s", index, shorten(block))
        return None

    field_lines = lines[1:]
    address = extract_field(field_lines, 'address') or ADDRESS_UNKNOWN
    closing_time = extract_field(field_lines, 'closing_time') or CLOSING_TIME_UNKNOWN
    status = decode_status(extract_field(field_lines, 'status'))
    distance = extract_field(field_lines, 'distance')

    return Store(
        id=f"store-{index}-{batch_millis}",
        name=name,
        address=address,
        status=status,
        closing_time=closing_time,
        urgency=classify_urgency(status, block, now),
        map_url=build_maps_search_url(name, address),
        distance=distance,
    )


def parse_store_response(text: str, grounding_chunks: Optional[Sequence[Any]] = None,
                         now: Optional[datetime] = None) -> List[Store]:
    """
    Convert the model's answer into store records, in answer order.

    Grounding chunks are accepted but never mapped to stores: their order
    drifts from the text order and would attach the wrong map link.

    Args:
        text: Free-form answer text
        grounding_chunks: Optional grounding metadata from the upstream service
        now: Reference instant for urgency (defaults to local now)

    Returns:
        List of Store records (possibly empty)
    """
    if not text or not text.strip():
        return []

    if now is None:
        now = get_local_now()

    if grounding_chunks:
        logger.debug("Ignoring %d grounding chunks for map links", len(grounding_chunks))

    cleaned = strip_markdown(text)
    batch_millis = time.time_ns() // 1_000_000

    stores = []
    for index, block in enumerate(split_store_blocks(cleaned)):
        store = parse_store_block(block, index, batch_millis, now)
        if store is not None:
            stores.append(store)

    logger.info("Parsed %d stores from %d characters of text", len(stores), len(text))
    return stores
