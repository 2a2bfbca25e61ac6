from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.utils.ids import id_factory


class ConventionSeries(Base):
    __tablename__ = "convention_series"

    id = Column(String, primary_key=True, default=id_factory("ser"))
    name = Column(String, nullable=False)

    # Ownership
    organizer_user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    organizer = relationship("User", back_populates="series")
    conventions = relationship("Convention", back_populates="series")
