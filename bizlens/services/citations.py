# bizlens/services/citations.py

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional

DEFAULT_LINK_TITLE = "Business Link"


def _as_mapping(chunk) -> Optional[Mapping]:
    """Grounding chunks arrive either as plain dicts or as SDK pydantic objects."""
    if isinstance(chunk, Mapping):
        return chunk
    if hasattr(chunk, "model_dump"):
        return chunk.model_dump(exclude_none=True)
    return None


def collect_grounding_links(chunks) -> List[Dict[str, Any]]:
    """
    Keep only chunks that point at a Google Maps place, reduced to
    {title, uri}. Web chunks and anything unreadable are dropped.
    """
    if not isinstance(chunks, Iterable) or isinstance(chunks, (str, bytes, Mapping)):
        return []

    links = []
    for chunk in chunks:
        data = _as_mapping(chunk)
        if not data:
            continue
        place = data.get("maps")
        if not place:
            continue
        place = _as_mapping(place) or {}
        title = place.get("title")
        uri = place.get("uri")
        links.append(
            {
                "title": str(title) if title else DEFAULT_LINK_TITLE,
                "uri": str(uri) if uri else "",
            }
        )
    return links
