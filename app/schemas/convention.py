from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from app.models.enums import ConventionStatus
from app.schemas.pricing import (
    PriceDiscountIn,
    PriceDiscountOut,
    PriceTierIn,
    PriceTierOut,
    PricingScheduleEntry,
)
from app.schemas.venue_hotel import HotelOut, VenueHotelIn, VenueOut

CAMEL = {"alias_generator": to_camel, "populate_by_name": True}

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

IMAGE_FIELDS = frozenset({"cover_image_url", "profile_image_url"})

# Columns that may be omitted from an update but never cleared
NON_NULLABLE_UPDATE_FIELDS = ("name", "slug", "status", "series_id", "is_one_day_event", "is_tbd")


# ---------------- SERIES ----------------
class SeriesCreate(BaseModel):
    model_config = CAMEL

    name: str = Field(min_length=1)


class SeriesOut(BaseModel):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    name: str
    organizer_user_id: int
    created_at: datetime
    updated_at: datetime


# ---------------- CREATE ----------------
class ConventionCreate(BaseModel):
    model_config = CAMEL

    name: str = Field(min_length=1)
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN)
    series_id: str = Field(min_length=1)

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_one_day_event: bool = False
    is_tbd: bool = Field(default=False, alias="isTBD")

    city: Optional[str] = None
    state_abbreviation: Optional[str] = None
    state_name: Optional[str] = None
    country: Optional[str] = None

    description_short: Optional[str] = None
    description_main: Optional[str] = None
    website_url: Optional[str] = None


# ---------------- UPDATE ----------------
class ConventionUpdate(BaseModel):
    """Body of the organizer PUT. Every field is optional; absent fields keep their value."""

    model_config = CAMEL

    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    city: Optional[str] = None
    state_abbreviation: Optional[str] = None
    state_name: Optional[str] = None
    country: Optional[str] = None
    status: Optional[ConventionStatus] = None
    series_id: Optional[str] = None
    description_short: Optional[str] = None
    description_main: Optional[str] = None
    is_one_day_event: Optional[bool] = None
    is_tbd: Optional[bool] = Field(default=None, alias="isTBD")
    website_url: Optional[str] = None
    registration_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    profile_image_url: Optional[str] = None

    venue_hotel: Optional[VenueHotelIn] = None
    price_tiers: Optional[List[PriceTierIn]] = None
    price_discounts: Optional[List[PriceDiscountIn]] = None

    @model_validator(mode="after")
    def no_null_required_fields(self):
        for field in NON_NULLABLE_UPDATE_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def is_image_only(self) -> bool:
        fields = self.model_fields_set
        return bool(fields) and fields <= IMAGE_FIELDS


class ConventionStatusUpdate(BaseModel):
    status: ConventionStatus


# ---------------- OUTPUT ----------------
class ScheduleDayOut(BaseModel):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    day_offset: int
    label: Optional[str] = None
    is_official: bool


class ConventionSummaryOut(BaseModel):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    name: str
    slug: str
    series_id: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_one_day_event: bool
    is_tbd: bool = Field(alias="isTBD")
    city: Optional[str] = None
    state_abbreviation: Optional[str] = None
    state_name: Optional[str] = None
    country: Optional[str] = None
    status: ConventionStatus
    description_short: Optional[str] = None
    cover_image_url: Optional[str] = None
    profile_image_url: Optional[str] = None
    deleted_at: Optional[datetime] = None


class ConventionOut(ConventionSummaryOut):
    description_main: Optional[str] = None
    website_url: Optional[str] = None
    registration_url: Optional[str] = None
    guests_stay_at_primary_venue: bool
    created_at: datetime
    updated_at: datetime

    venues: List[VenueOut] = []
    hotels: List[HotelOut] = []
    price_tiers: List[PriceTierOut] = []
    price_discounts: List[PriceDiscountOut] = []
    schedule_days: List[ScheduleDayOut] = []


class PublicConventionOut(ConventionOut):
    pricing_schedule: List[PricingScheduleEntry] = []


class ConventionSearchResult(BaseModel):
    model_config = CAMEL

    items: List[ConventionSummaryOut]
    total: int
    page: int
    total_pages: int
