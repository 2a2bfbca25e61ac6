from sqlalchemy import Column, String, Boolean, ForeignKey, JSON, Text
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.utils.ids import id_factory


class Venue(Base):
    __tablename__ = "venues"

    id = Column(String, primary_key=True, default=id_factory("ven"))
    convention_id = Column(
        String, ForeignKey("conventions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    venue_name = Column(String, nullable=False)
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

    amenities = Column(JSON, nullable=False, default=list)
    parking_info = Column(Text)
    public_transport_info = Column(Text)
    overall_accessibility_notes = Column(Text)

    # At most one per convention
    is_primary_venue = Column(Boolean, nullable=False, default=False)

    convention = relationship("Convention", back_populates="venues")
    photos = relationship("VenuePhoto", back_populates="venue", cascade="all, delete-orphan")
