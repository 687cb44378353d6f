# bizlens/services/extraction.py

"""
Pulls the business JSON array out of the model's free-text answer.

The model is asked to wrap its array in [DATA_START] ... [DATA_END], but it
does not always comply, so a fenced ```json block is accepted as a fallback.
Strategies run in order and the first one that finds something wins.
"""

import json
import logging
import re
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

DATA_START_TAG = "[DATA_START]"
DATA_END_TAG = "[DATA_END]"

FENCED_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def _between_markers(text: str) -> Optional[str]:
    if DATA_START_TAG not in text or DATA_END_TAG not in text:
        return None
    after_start = text.split(DATA_START_TAG, 1)[1]
    return after_start.split(DATA_END_TAG, 1)[0].strip()


def _fenced_block(text: str) -> Optional[str]:
    match = FENCED_BLOCK_RE.search(text)
    if not match:
        return None
    return match.group(1).strip()


EXTRACTION_STRATEGIES: Tuple[Callable[[str], Optional[str]], ...] = (
    _between_markers,
    _fenced_block,
)


def extract_payload(text: str) -> str:
    """
    Return the substring believed to hold the JSON array, or "" when the
    response carries no structured data.
    """
    text = text or ""
    for strategy in EXTRACTION_STRATEGIES:
        payload = strategy(text)
        if payload is not None:
            return payload
    return ""


def parse_business_array(payload: str) -> List[Any]:
    if not payload:
        return []

    # tolerate prose the model left around the array inside the markers
    start = payload.find("[")
    end = payload.rfind("]")
    if start == -1 or end == -1 or end < start:
        return []

    try:
        parsed = json.loads(payload[start:end + 1])
    except (ValueError, RecursionError) as e:
        logger.warning("Failed to parse extracted JSON payload: %s (%r)", e, payload[:200])
        return []

    if not isinstance(parsed, list):
        return []
    return parsed


def extract_businesses(text: str) -> List[Any]:
    return parse_business_array(extract_payload(text))


def strip_payload(text: str) -> str:
    """
    Remove the marker-delimited payload and the first leftover fenced block,
    leaving only the narrative part of the answer.
    """
    text = text or ""

    if DATA_START_TAG in text:
        head, rest = text.split(DATA_START_TAG, 1)
        if DATA_END_TAG in rest:
            tail = rest.split(DATA_END_TAG, 1)[1]
        else:
            tail = ""
        text = "\n\n".join(part.strip() for part in (head, tail) if part.strip())

    return FENCED_BLOCK_RE.sub("", text, count=1).strip()
