# bizlens/services/search_service.py

"""
Query orchestration: one Gemini call, then extraction -> normalization ->
analytics on the answer text, with citations collected from the grounding
metadata alongside.

Only the provider call may fail (GeminiServiceError). Everything after it
degrades to empty results instead of raising.
"""

import logging
from typing import Optional

from bizlens.llm import gemini_client
from bizlens.models.request_models import GeoPoint
from bizlens.models.response_models import SearchResponse
from bizlens.services.analytics import build_analytics
from bizlens.services.citations import collect_grounding_links
from bizlens.services.data_normalizer import normalize_businesses
from bizlens.services.extraction import extract_businesses, strip_payload

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "Analysis complete."


def build_summary(text: str) -> str:
    return strip_payload(text) or DEFAULT_SUMMARY


def assemble_response(text: str, grounding_chunks=None, location: Optional[GeoPoint] = None) -> SearchResponse:
    raw_items = extract_businesses(text)
    businesses = normalize_businesses(raw_items, fallback_location=location)

    logger.info("Extracted %d businesses from Gemini answer", len(businesses))

    return SearchResponse(
        businesses=businesses,
        summary=build_summary(text),
        analytics=build_analytics(businesses),
        groundingLinks=collect_grounding_links(grounding_chunks),
    )


def perform_smart_search(
    query: str,
    location: Optional[GeoPoint] = None,
    geography: Optional[str] = None,
) -> SearchResponse:
    query = (query or "").strip()
    if not query:
        raise ValueError("query must not be empty")

    reply = gemini_client.generate_market_analysis(query, location=location, geography=geography or None)
    return assemble_response(reply.text, reply.grounding_chunks, location)
