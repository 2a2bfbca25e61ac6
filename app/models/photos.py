from sqlalchemy import Column, String, ForeignKey, Text
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.utils.ids import id_factory


class VenuePhoto(Base):
    __tablename__ = "venue_photos"

    id = Column(String, primary_key=True, default=id_factory("vph"))
    venue_id = Column(
        String, ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True
    )

    url = Column(String, nullable=False)
    caption = Column(Text, nullable=True)

    venue = relationship("Venue", back_populates="photos")


class HotelPhoto(Base):
    __tablename__ = "hotel_photos"

    id = Column(String, primary_key=True, default=id_factory("hph"))
    hotel_id = Column(
        String, ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True
    )

    url = Column(String, nullable=False)
    caption = Column(Text, nullable=True)

    hotel = relationship("Hotel", back_populates="photos")
