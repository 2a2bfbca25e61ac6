from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


# ---------------- PHOTOS ----------------
class PhotoIn(BaseModel):
    model_config = CAMEL

    id: Optional[str] = None
    url: Optional[str] = None
    caption: Optional[str] = None


class PhotoOut(BaseModel):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    url: str
    caption: Optional[str] = None


# ---------------- SHARED LOCATION FIELDS ----------------
class LocationFields(BaseModel):
    model_config = CAMEL

    description: Optional[str] = None
    website_url: Optional[str] = None
    google_maps_url: Optional[str] = None
    street_address: Optional[str] = None
    city: Optional[str] = None
    state_region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    amenities: List[str] = []
    parking_info: Optional[str] = None
    public_transport_info: Optional[str] = None
    overall_accessibility_notes: Optional[str] = None


# ---------------- VENUES ----------------
class VenueIn(LocationFields):
    id: Optional[str] = None
    venue_name: str = Field(min_length=1)
    marked_for_primary_promotion: bool = False
    # None leaves stored photos untouched, [] removes them
    photos: Optional[List[PhotoIn]] = Field(default=None, max_length=1)


class VenueOut(LocationFields):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    venue_name: str
    is_primary_venue: bool
    photos: List[PhotoOut] = []


# ---------------- HOTELS ----------------
class HotelIn(LocationFields):
    id: Optional[str] = None
    hotel_name: str = Field(min_length=1)
    is_at_primary_venue_location: bool = False
    group_rate_or_booking_code: Optional[str] = None
    group_price: Optional[float] = None
    booking_link: Optional[str] = None
    booking_cutoff_date: Optional[date] = None
    photos: Optional[List[PhotoIn]] = Field(default=None, max_length=1)


class HotelOut(LocationFields):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    hotel_name: str
    is_primary_hotel: bool
    is_at_primary_venue_location: bool
    group_rate_or_booking_code: Optional[str] = None
    group_price: Optional[float] = None
    booking_link: Optional[str] = None
    booking_cutoff_date: Optional[date] = None
    photos: List[PhotoOut] = []


# ---------------- VENUE / HOTEL TAB ----------------
class VenueHotelIn(BaseModel):
    model_config = CAMEL

    primary_venue: Optional[VenueIn] = None
    secondary_venues: Optional[List[VenueIn]] = None
    guests_stay_at_primary_venue: Optional[bool] = None
    primary_hotel_details: Optional[HotelIn] = None
    hotels: Optional[List[HotelIn]] = None

    @model_validator(mode="after")
    def single_promotion(self):
        marked = [v for v in self.secondary_venues or [] if v.marked_for_primary_promotion]
        if len(marked) > 1:
            raise ValueError("Only one secondary venue can be marked for primary promotion")
        return self
