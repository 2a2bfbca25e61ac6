from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class PriceTierIn(BaseModel):
    model_config = CAMEL

    id: Optional[str] = None
    label: str = Field(min_length=1)
    amount: float = Field(ge=0)
    order: int = Field(default=0, ge=0)


class PriceTierOut(BaseModel):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    label: str
    amount: float
    order: int


class PriceDiscountIn(BaseModel):
    model_config = CAMEL

    id: Optional[str] = None
    price_tier_id: str
    cutoff_date: date
    discounted_amount: float = Field(ge=0)


class PriceDiscountOut(BaseModel):
    model_config = {**CAMEL, "from_attributes": True}

    id: str
    price_tier_id: str
    cutoff_date: date
    discounted_amount: float


class TierPrice(BaseModel):
    model_config = CAMEL

    tier_id: str
    label: str
    regular_amount: float
    discounted_amount: Optional[float] = None


class PricingScheduleEntry(BaseModel):
    model_config = CAMEL

    cutoff_date: date
    prices: List[TierPrice]
