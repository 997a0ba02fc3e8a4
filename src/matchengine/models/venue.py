"""Venue models."""

from typing import Dict, List, Optional

from pydantic import Field

from .base import ApiModel
from .resource import VenueResource


class VenueMapping(ApiModel):
    """Link between the integrator's venue ID and a MatchEngine venue"""
    external_id: str
    venue_id: int
    venue_name: str = ""
    created: bool = False


class VenueWithResources(ApiModel):
    """A mapped venue together with its resources"""
    venue_id: int
    venue_name: str
    external_id: str
    timezone: Optional[str] = None
    resources: List[VenueResource] = Field(default_factory=list)

    @property
    def bookable_resources(self) -> List[VenueResource]:
        """Resources that are active and open for booking"""
        return [r for r in self.resources if r.is_bookable and r.is_active]


class Venue(ApiModel):
    """Public venue listing item"""
    id: int
    name: str
    slug: str
    description: str = ""
    short_description: str = ""
    venue_type: str = ""
    timezone: str = "Europe/Berlin"

    street_address: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    email: str = ""
    phone: str = ""
    website: str = ""

    is_active: bool = True
    is_featured: bool = False
    is_verified: bool = False

    price_range: str = ""

    parking_available: bool = False
    wheelchair_accessible: bool = False
    instant_booking: bool = False

    average_rating: Optional[float] = None
    total_reviews: int = 0

    primary_image: Optional[str] = None


class OpeningRange(ApiModel):
    open: str
    close: str


class OpeningDay(ApiModel):
    closed: bool = False
    ranges: List[OpeningRange] = Field(default_factory=list)


class VenueImage(ApiModel):
    id: int
    image: str
    alt_text: str = ""
    caption: str = ""
    is_primary: bool = False
    is_cover: bool = False
    image_type: str = ""


class VenueAmenity(ApiModel):
    id: int
    name: str
    slug: str = ""
    icon: str = ""
    category: str = ""


class VenueDetail(Venue):
    """Full venue information including policies and related data"""
    opening_hours: Dict[str, OpeningDay] = Field(default_factory=dict)
    cancellation_policy: str = ""
    house_rules: str = ""
    min_advance_booking_hours: int = 0
    max_advance_booking_days: int = 0
    accepts_online_payment: bool = False
    accepts_cash: bool = False
    facebook_url: str = ""
    instagram_url: str = ""

    resources: List[VenueResource] = Field(default_factory=list)
    images: List[VenueImage] = Field(default_factory=list)
    amenities: List[VenueAmenity] = Field(default_factory=list)
