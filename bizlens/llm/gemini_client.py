import logging
import os
from string import Template
from typing import Any, List, NamedTuple, Optional

from google import genai
from google.genai import types

from bizlens.core.config import settings

logger = logging.getLogger(__name__)

PROMPT_PATH = os.path.join(os.path.dirname(__file__), "prompts", "market_analysis_prompt.txt")

with open(PROMPT_PATH, encoding="utf-8") as f:
    PROMPT_TEMPLATE = Template(f.read())


class GeminiServiceError(RuntimeError):
    """The Gemini request could not be completed (network, auth, quota...)."""


class ProviderReply(NamedTuple):
    text: str
    grounding_chunks: List[Any]


_client = None


def _get_client():
    global _client
    if _client is None:
        _client = genai.Client(api_key=settings.GEMINI_API_KEY)
    return _client


def build_system_instruction(query: str, geography: Optional[str] = None) -> str:
    if geography:
        geo_context = f"specifically in the region of {geography}"
    else:
        geo_context = "near the user's current location"
    return PROMPT_TEMPLATE.substitute(query=query, geo_context=geo_context)


def build_content_prompt(query: str, geography: Optional[str] = None) -> str:
    return (
        f'Perform a deep market analysis for "{query}" in "{geography or "the local area"}". '
        "Find businesses and list their activities, contact info, and key personnel."
    )


def build_generation_config(system_instruction: str, location=None) -> types.GenerateContentConfig:
    tool_config = None
    if location is not None:
        tool_config = types.ToolConfig(
            retrieval_config=types.RetrievalConfig(
                lat_lng=types.LatLng(
                    latitude=location.latitude,
                    longitude=location.longitude,
                )
            )
        )

    return types.GenerateContentConfig(
        system_instruction=system_instruction,
        tools=[types.Tool(google_maps=types.GoogleMaps())],
        tool_config=tool_config,
    )


def _grounding_chunks(response) -> List[Any]:
    # metadata is optional; anything unexpected just means no citations
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None)
    return list(chunks) if isinstance(chunks, (list, tuple)) else []


def generate_market_analysis(query: str, location=None, geography: Optional[str] = None) -> ProviderReply:
    """
    Ask Gemini (with Google Maps grounding) for businesses matching `query`.

    Returns the raw answer text plus the grounding chunks. Raises
    GeminiServiceError if the request itself fails; the text is not
    inspected here.
    """
    config = build_generation_config(build_system_instruction(query, geography), location)

    try:
        response = _get_client().models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=build_content_prompt(query, geography),
            config=config,
        )
        text = response.text or ""
    except Exception as e:
        logger.error("Gemini API error for query %r: %s", query, e)
        raise GeminiServiceError(str(e)) from e

    return ProviderReply(text=text, grounding_chunks=_grounding_chunks(response))
