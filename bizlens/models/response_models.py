from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class ContactPerson(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None

class Location(BaseModel):
    lat: float = 0.0
    lng: float = 0.0

class Business(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str = ""
    industry: str = "Other"
    activities: List[str] = Field(default_factory=list)
    rating: float = 0.0
    address: str = ""
    location: Location = Field(default_factory=Location)
    url: Optional[str] = None
    popularity_score: Optional[float] = Field(default=None, alias="popularityScore")
    # contact info
    phone: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    contact_person: Optional[ContactPerson] = Field(default=None, alias="contactPerson")

class IndustryCount(BaseModel):
    name: str
    value: int

class RatingCount(BaseModel):
    rating: str
    count: int

class ActivityCount(BaseModel):
    activity: str
    count: int

class AnalyticsData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    industry_distribution: List[IndustryCount] = Field(alias="industryDistribution")
    rating_distribution: List[RatingCount] = Field(alias="ratingDistribution")
    activity_frequency: List[ActivityCount] = Field(alias="activityFrequency")

class GroundingLink(BaseModel):
    title: str
    uri: str = ""

class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    businesses: List[Business]
    summary: str
    analytics: AnalyticsData
    grounding_links: List[GroundingLink] = Field(alias="groundingLinks")

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)
