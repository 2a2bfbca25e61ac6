from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.utils.ids import id_factory


class ScheduleDay(Base):
    __tablename__ = "schedule_days"

    id = Column(String, primary_key=True, default=id_factory("day"))
    convention_id = Column(
        String, ForeignKey("conventions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    day_offset = Column(Integer, nullable=False, default=0)  # 0 = first convention day
    label = Column(String)
    is_official = Column(Boolean, nullable=False, default=True)

    convention = relationship("Convention", back_populates="schedule_days")
