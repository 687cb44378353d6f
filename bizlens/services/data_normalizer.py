# bizlens/services/data_normalizer.py

import math
from collections.abc import Mapping
from typing import Any, Dict, List, Optional
from urllib.parse import quote

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="
DEFAULT_INDUSTRY = "Other"

# keys rebuilt by normalize_business; anything else the model sends is kept as-is
CANONICAL_KEYS = frozenset(
    {
        "id", "name", "industry", "activities", "rating", "address", "location",
        "lat", "lng", "url", "popularityScore", "phone", "website", "email",
        "contactPerson", "popularity_score", "contact_person",
    }
)

# same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _to_float(value) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        # integer literal beyond float range
        return None
    return value if math.isfinite(value) else None


def _to_text(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _to_coordinate(value) -> Optional[float]:
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    value = _to_float(value)
    if value is None or value == 0:
        return None
    return value


def _to_activities(value) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    activities = []
    for item in value:
        text = _to_text(item)
        if text is not None:
            activities.append(text)
    return activities


def _to_contact(value) -> Optional[Dict[str, Optional[str]]]:
    if not isinstance(value, Mapping):
        return None
    return {
        "name": _to_text(value.get("name")),
        "role": _to_text(value.get("role")),
    }


def build_maps_search_url(name: str, address: str) -> str:
    return MAPS_SEARCH_URL + quote(f"{name} {address}", safe=_URI_COMPONENT_SAFE)


def normalize_business(raw, index: int, fallback_location=None) -> Dict[str, Any]:
    """
    Convert one raw record from the model into our canonical business dict.

    Never fails: every missing or mistyped field gets a default, and a
    non-object entry is treated as an empty record.

    Canonical fields:
    - id, name, industry, activities, rating, address, location{lat,lng},
      url, popularityScore, phone, website, email, contactPerson{name,role}

    Any other key the model sends is passed through untouched.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    name = _to_text(raw.get("name")) or ""
    address = _to_text(raw.get("address")) or ""

    industry = raw.get("industry")
    if not isinstance(industry, str) or not industry.strip():
        industry = DEFAULT_INDUSTRY

    rating = _to_float(raw.get("rating"))
    if rating is None:
        rating = 0.0

    fallback_lat = fallback_location.latitude if fallback_location else 0.0
    fallback_lng = fallback_location.longitude if fallback_location else 0.0
    lat = _to_coordinate(raw.get("lat"))
    lng = _to_coordinate(raw.get("lng"))

    url = raw.get("url")
    if not isinstance(url, str) or not url.strip():
        url = build_maps_search_url(name, address)

    popularity = raw.get("popularityScore")

    extras = {
        k: v for k, v in raw.items()
        if isinstance(k, str) and not k.startswith("_") and k not in CANONICAL_KEYS
    }

    return {
        **extras,
        "id": f"biz-{index}",
        "name": name,
        "industry": industry,
        "activities": _to_activities(raw.get("activities")),
        "rating": rating,
        "address": address,
        "location": {
            "lat": lat if lat is not None else float(fallback_lat),
            "lng": lng if lng is not None else float(fallback_lng),
        },
        "url": url,
        "popularityScore": _to_float(popularity),
        "phone": _to_text(raw.get("phone")),
        "website": _to_text(raw.get("website")),
        "email": _to_text(raw.get("email")),
        "contactPerson": _to_contact(raw.get("contactPerson")),
    }


def normalize_businesses(raw_items, fallback_location=None) -> List[Dict[str, Any]]:
    return [
        normalize_business(item, index, fallback_location)
        for index, item in enumerate(raw_items or [])
    ]
