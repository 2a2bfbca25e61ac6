from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.utils.ids import id_factory


class PriceTier(Base):
    __tablename__ = "price_tiers"

    id = Column(String, primary_key=True, default=id_factory("tier"))
    convention_id = Column(
        String, ForeignKey("conventions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    label = Column(String, nullable=False)
    amount = Column(Float, nullable=False, default=0.0)
    order = Column(Integer, nullable=False, default=0)

    convention = relationship("Convention", back_populates="price_tiers")
    discounts = relationship("PriceDiscount", back_populates="price_tier", cascade="all, delete")


class PriceDiscount(Base):
    __tablename__ = "price_discounts"

    id = Column(String, primary_key=True, default=id_factory("disc"))
    convention_id = Column(
        String, ForeignKey("conventions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    price_tier_id = Column(
        String, ForeignKey("price_tiers.id", ondelete="CASCADE"), nullable=False
    )

    cutoff_date = Column(Date, nullable=False)
    discounted_amount = Column(Float, nullable=False)

    convention = relationship("Convention", back_populates="price_discounts")
    price_tier = relationship("PriceTier", back_populates="discounts")
