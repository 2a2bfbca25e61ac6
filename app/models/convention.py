from datetime import datetime

from sqlalchemy import Column, String, Boolean, Date, DateTime, Enum, ForeignKey, Text
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.models.enums import ConventionStatus
from app.utils.ids import id_factory


class Convention(Base):
    __tablename__ = "conventions"

    id = Column(String, primary_key=True, default=id_factory("con"))
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)

    series_id = Column(String, ForeignKey("convention_series.id"), nullable=False, index=True)

    # Dates are nullable while TBD
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    is_one_day_event = Column(Boolean, nullable=False, default=False)
    is_tbd = Column(Boolean, nullable=False, default=False)

    # Location
    city = Column(String)
    state_abbreviation = Column(String)
    state_name = Column(String)
    country = Column(String)

    status = Column(Enum(ConventionStatus), nullable=False, default=ConventionStatus.DRAFT)

    description_short = Column(String)
    description_main = Column(Text)
    website_url = Column(String)
    registration_url = Column(String)
    cover_image_url = Column(String)
    profile_image_url = Column(String)

    guests_stay_at_primary_venue = Column(Boolean, nullable=False, default=False)

    deleted_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # RELATIONSHIPS -------------------------------------

    series = relationship("ConventionSeries", back_populates="conventions")

    venues = relationship(
        "Venue",
        back_populates="convention",
        cascade="all, delete-orphan",
        order_by="Venue.venue_name"
    )
    hotels = relationship(
        "Hotel",
        back_populates="convention",
        cascade="all, delete-orphan",
        order_by="Hotel.hotel_name"
    )
    price_tiers = relationship(
        "PriceTier",
        back_populates="convention",
        cascade="all, delete-orphan",
        order_by="PriceTier.order"
    )
    price_discounts = relationship(
        "PriceDiscount",
        back_populates="convention",
        cascade="all, delete-orphan",
        order_by="PriceDiscount.cutoff_date"
    )
    schedule_days = relationship(
        "ScheduleDay",
        back_populates="convention",
        cascade="all, delete-orphan",
        order_by="ScheduleDay.day_offset"
    )
