import logging

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from bizlens.core.config import settings

logger = logging.getLogger(__name__)

geolocator = Nominatim(user_agent=settings.GEOCODER_USER_AGENT)


def geocode_text_location(text: str):
    """
    Convert typed location name → (lat, lng).
    Returns (None, None) if not found.
    """
    try:
        result = geolocator.geocode(text)
    except GeopyError as e:
        logger.warning("Geocoding failed for %r: %s", text, e)
        return None, None
    if not result:
        return None, None
    return float(result.latitude), float(result.longitude)
