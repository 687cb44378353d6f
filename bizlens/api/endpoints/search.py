# bizlens/api/endpoints/search.py

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from bizlens.llm.gemini_client import GeminiServiceError
from bizlens.models.request_models import GeoPoint, SearchRequest
from bizlens.services.geopy_service import geocode_text_location
from bizlens.services.search_service import perform_smart_search

bp = Blueprint("search", __name__)

PROVIDER_FAILURE_MESSAGE = (
    "Failed to fetch business data. Please check your API key and network connection."
)


@bp.route("/search", methods=["POST"])
def search():
    try:
        payload = request.get_json(silent=True) or {}
        req = SearchRequest(**payload)
    except (TypeError, ValidationError) as e:
        return jsonify({"error": "Invalid request", "details": str(e)}), 400

    location = req.location()

    # no coordinates but a typed place → geocode it for the grounding bias
    if location is None and req.location_text:
        lat, lng = geocode_text_location(req.location_text)
        if lat is None or lng is None:
            return jsonify(
                {
                    "error": "Could not geocode location",
                    "details": req.location_text,
                }
            ), 400
        location = GeoPoint(latitude=lat, longitude=lng)

    try:
        result = perform_smart_search(req.query, location=location, geography=req.geography)
    except GeminiServiceError as e:
        return jsonify({"error": PROVIDER_FAILURE_MESSAGE, "details": str(e)}), 502

    return jsonify(result.to_json_dict()), 200
