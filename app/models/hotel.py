from sqlalchemy import Column, String, Boolean, Float, Date, ForeignKey, JSON, Text
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.utils.ids import id_factory


class Hotel(Base):
    __tablename__ = "hotels"

    id = Column(String, primary_key=True, default=id_factory("hot"))
    convention_id = Column(
        String, ForeignKey("conventions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    hotel_name = Column(String, nullable=False)
    description = Column(Text)
    website_url = Column(String)
    google_maps_url = Column(String)

    # Address / contact
    street_address = Column(String)
    city = Column(String)
    state_region = Column(String)
    postal_code = Column(String)
    country = Column(String)
    contact_email = Column(String)
    contact_phone = Column(String)

    # Booking
    group_rate_or_booking_code = Column(String)
    group_price = Column(Float, nullable=True)
    booking_link = Column(String)
    booking_cutoff_date = Column(Date, nullable=True)

    amenities = Column(JSON, nullable=False, default=list)
    parking_info = Column(Text)
    public_transport_info = Column(Text)
    overall_accessibility_notes = Column(Text)

    # At most one per convention, none while guests stay at the primary venue
    is_primary_hotel = Column(Boolean, nullable=False, default=False)
    is_at_primary_venue_location = Column(Boolean, nullable=False, default=False)

    convention = relationship("Convention", back_populates="hotels")
    photos = relationship("HotelPhoto", back_populates="hotel", cascade="all, delete-orphan")
