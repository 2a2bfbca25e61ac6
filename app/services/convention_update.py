"""Organizer convention update.

``update_convention`` is the single entry point used by the PUT route. It
runs every step on one session and commits once at the end; any failure
rolls the whole request back.
"""

from datetime import datetime

from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.models.convention import Convention
from app.models.convention_series import ConventionSeries
from app.schemas.convention import IMAGE_FIELDS, ConventionUpdate
from app.services.errors import ConventionNotFoundError, InvalidDateRangeError, SlugConflictError
from app.services.pricing import sync_price_discounts, sync_price_tiers
from app.services.schedule import realign_schedule_days
from app.services.venue_hotel import reconcile_venue_hotel

logger = get_logger().bind(log_type="convention")

# Scalar columns copied straight from the body when present
SCALAR_FIELDS = (
    "name",
    "city",
    "state_abbreviation",
    "state_name",
    "country",
    "status",
    "series_id",
    "description_short",
    "description_main",
    "is_one_day_event",
    "is_tbd",
    "website_url",
    "registration_url",
    "cover_image_url",
    "profile_image_url",
)


def get_active_convention(db: Session, convention_id: str) -> Convention:
    convention = (
        db.query(Convention)
        .filter(Convention.id == convention_id, Convention.deleted_at.is_(None))
        .first()
    )
    if not convention:
        raise ConventionNotFoundError(convention_id)
    return convention


def ensure_slug_available(db: Session, slug: str, convention_id: str = None) -> None:
    query = db.query(Convention.id).filter(
        Convention.slug == slug,
        Convention.deleted_at.is_(None),
    )
    if convention_id:
        query = query.filter(Convention.id != convention_id)
    if query.first():
        raise SlugConflictError(slug)


def apply_image_update(convention: Convention, payload: ConventionUpdate) -> None:
    for name in IMAGE_FIELDS & payload.model_fields_set:
        setattr(convention, name, getattr(payload, name))
    convention.updated_at = datetime.utcnow()


def apply_scalar_update(db: Session, convention: Convention, payload: ConventionUpdate) -> None:
    """Write the convention's own columns for a full update."""
    provided = payload.model_fields_set

    for name in SCALAR_FIELDS:
        if name in provided:
            setattr(convention, name, getattr(payload, name))

    if "slug" in provided and payload.slug != convention.slug:
        ensure_slug_available(db, payload.slug, convention.id)
        convention.slug = payload.slug

    venue_hotel = payload.venue_hotel
    if venue_hotel is not None and venue_hotel.guests_stay_at_primary_venue is not None:
        convention.guests_stay_at_primary_venue = venue_hotel.guests_stay_at_primary_venue

    # Dates are always rewritten on a full update: parsed value or null
    start_date, end_date = payload.start_date, payload.end_date

    if convention.is_tbd:
        convention.is_one_day_event = False

    if start_date and end_date and start_date > end_date:
        raise InvalidDateRangeError("Start date must be before end date")

    if convention.is_one_day_event and start_date:
        end_date = start_date

    convention.start_date = start_date
    convention.end_date = end_date
    convention.updated_at = datetime.utcnow()
    db.flush()


def touch_series(db: Session, series_id: str) -> None:
    db.query(ConventionSeries).filter(ConventionSeries.id == series_id).update(
        {ConventionSeries.updated_at: datetime.utcnow()},
        synchronize_session="fetch",
    )


def update_convention(db: Session, convention_id: str, payload: ConventionUpdate) -> Convention:
    convention = get_active_convention(db, convention_id)
    image_only = payload.is_image_only()

    logger.info(
        f"Convention update started | Convention={convention_id} "
        f"| Mode={'image-only' if image_only else 'full'}"
    )

    try:
        if image_only:
            apply_image_update(convention, payload)
        else:
            apply_scalar_update(db, convention, payload)

            if payload.venue_hotel is not None:
                reconcile_venue_hotel(db, convention, payload.venue_hotel)

            if payload.price_tiers is not None:
                sync_price_tiers(db, convention.id, payload.price_tiers)
            if payload.price_discounts is not None:
                sync_price_discounts(db, convention.id, payload.price_discounts)

            realign_schedule_days(db, convention)
            touch_series(db, convention.series_id)

        db.commit()

    except Exception as e:
        db.rollback()
        logger.error(f"Convention update failed | Convention={convention_id} -> {e}")
        raise

    db.refresh(convention)
    logger.info(f"Convention update finished | Convention={convention_id}")
    return convention
