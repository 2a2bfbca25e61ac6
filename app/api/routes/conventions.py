from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.core.redis import convention_cache_key, get_cache, set_cache
from app.schemas.convention import ConventionSearchResult, PublicConventionOut
from app.schemas.pricing import PricingScheduleEntry
from app.services.conventions import get_public_convention, search_conventions
from app.services.errors import DomainError
from app.utils.pricing import build_pricing_schedule

router = APIRouter(prefix="/conventions", tags=["Conventions"])

DETAIL_CACHE_TTL = 300


# =====================================================================
# SEARCH
# =====================================================================
@router.get("/", response_model=ConventionSearchResult)
def list_conventions(
    query: str = "",
    city: str = "",
    state: str = "",
    country: str = "",
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    status: str = "",
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db)
):
    return search_conventions(
        db,
        query=query.strip(),
        city=city.strip(),
        state=state.strip(),
        country=country.strip(),
        start_date=start_date,
        end_date=end_date,
        status=status,
        page=page,
        limit=limit,
    )


# =====================================================================
# DETAIL (by slug)
# =====================================================================
@router.get("/{slug}", response_model=PublicConventionOut)
def get_convention(slug: str, db: Session = Depends(get_db)):
    cache_key = convention_cache_key(slug)

    cached = get_cache(cache_key)
    if cached:
        return cached

    try:
        convention = get_public_convention(db, slug)
    except DomainError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    result = PublicConventionOut.model_validate(convention)
    result.pricing_schedule = [
        PricingScheduleEntry.model_validate(entry)
        for entry in build_pricing_schedule(convention.price_tiers, convention.price_discounts)
    ]

    data = result.model_dump(mode="json", by_alias=True)
    set_cache(cache_key, data, ttl=DETAIL_CACHE_TTL)
    return data
