import pytest

from bizlens.llm.gemini_client import ProviderReply
from bizlens.services import search_service


@pytest.fixture
def fake_gemini(monkeypatch):
    """Replace the Gemini call with a canned reply and record what was asked."""
    calls = {}
    reply = {"text": "", "grounding_chunks": []}

    def fake_generate(query, location=None, geography=None):
        calls.update(query=query, location=location, geography=geography)
        return ProviderReply(text=reply["text"], grounding_chunks=reply["grounding_chunks"])

    monkeypatch.setattr(search_service.gemini_client, "generate_market_analysis", fake_generate)

    def set_reply(text, grounding_chunks=None):
        reply["text"] = text
        reply["grounding_chunks"] = grounding_chunks or []
        return calls

    return set_reply
