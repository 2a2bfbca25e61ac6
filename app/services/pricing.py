"""Price tier and discount sync for the convention update workflow."""

from typing import List

from sqlalchemy.orm import Session

from app.models.pricing import PriceDiscount, PriceTier
from app.schemas.pricing import PriceDiscountIn, PriceTierIn
from app.services.collections import apply_sync
from app.services.errors import InvalidPricingError


def _apply_tier(row: PriceTier, payload: PriceTierIn) -> None:
    row.label = payload.label
    row.amount = payload.amount
    row.order = payload.order


def _apply_discount(row: PriceDiscount, payload: PriceDiscountIn) -> None:
    row.price_tier_id = payload.price_tier_id
    row.cutoff_date = payload.cutoff_date
    row.discounted_amount = payload.discounted_amount


def sync_price_tiers(db: Session, convention_id: str, payloads: List[PriceTierIn]) -> List[PriceTier]:
    existing = db.query(PriceTier).filter(PriceTier.convention_id == convention_id).all()

    def drop_discounts(tier_ids):
        db.query(PriceDiscount).filter(
            PriceDiscount.price_tier_id.in_(tier_ids)
        ).delete(synchronize_session="fetch")

    return apply_sync(
        db,
        PriceTier,
        "convention_id",
        convention_id,
        existing,
        payloads,
        _apply_tier,
        before_delete=drop_discounts,
    )


def sync_price_discounts(
    db: Session, convention_id: str, payloads: List[PriceDiscountIn]
) -> List[PriceDiscount]:
    tier_ids = {
        row[0]
        for row in db.query(PriceTier.id).filter(PriceTier.convention_id == convention_id).all()
    }
    for payload in payloads:
        if payload.price_tier_id not in tier_ids:
            raise InvalidPricingError(
                f"Discount references unknown price tier '{payload.price_tier_id}'"
            )

    existing = db.query(PriceDiscount).filter(PriceDiscount.convention_id == convention_id).all()
    return apply_sync(
        db,
        PriceDiscount,
        "convention_id",
        convention_id,
        existing,
        payloads,
        _apply_discount,
    )
