# bizlens/models/request_models.py
from pydantic import BaseModel, field_validator
from typing import Optional

class GeoPoint(BaseModel):
    latitude: float
    longitude: float

class SearchRequest(BaseModel):
    query: str
    geography: Optional[str] = None

    # caller position, used to bias grounding and as fallback coordinates
    lat: Optional[float] = None
    lng: Optional[float] = None
    location_text: Optional[str] = None  # geocoded when lat/lng are missing

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("query must not be empty")
        return v

    @field_validator("geography", "location_text")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    def location(self) -> Optional[GeoPoint]:
        if self.lat is None or self.lng is None:
            return None
        return GeoPoint(latitude=self.lat, longitude=self.lng)
