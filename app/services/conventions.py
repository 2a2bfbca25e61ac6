"""Convention lifecycle and catalog queries outside the update workflow."""

import math
import re
from datetime import date, datetime

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.models.convention import Convention
from app.models.convention_series import ConventionSeries
from app.models.enums import ConventionStatus, UserRole
from app.models.photos import VenuePhoto
from app.models.venue import Venue
from app.schemas.convention import ConventionCreate
from app.services.convention_update import ensure_slug_available, get_active_convention, touch_series
from app.services.errors import (
    ConventionNotFoundError,
    InvalidDateRangeError,
    NotDeletedError,
    RestoreConflictError,
    SeriesNotFoundError,
    VenueNotFoundError,
)
from app.services.photos import delete_photos_for
from app.utils.ids import deleted_slug_suffix
from app.utils.locations import state_variations

logger = get_logger().bind(log_type="convention")

DELETED_SUFFIX = re.compile(r"-DELETED-[0-9a-z]+-[0-9a-z]+$")

PUBLIC_STATUSES = (ConventionStatus.PUBLISHED, ConventionStatus.PAST)


def slugify(text: str) -> str:
    slug = text.strip().lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]+", "", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


# =====================================================================
# SERIES
# =====================================================================
def get_owned_series(db: Session, series_id: str, user, role: UserRole) -> ConventionSeries:
    query = db.query(ConventionSeries).filter(ConventionSeries.id == series_id)
    if role != UserRole.ADMIN:
        query = query.filter(ConventionSeries.organizer_user_id == user.id)
    series = query.first()
    if not series:
        raise SeriesNotFoundError(series_id)
    return series


# =====================================================================
# CREATE
# =====================================================================
def create_convention(db: Session, data: ConventionCreate, user, role: UserRole) -> Convention:
    get_owned_series(db, data.series_id, user, role)

    start_date, end_date = data.start_date, data.end_date
    is_one_day_event = False if data.is_tbd else data.is_one_day_event

    if not data.is_tbd:
        if not start_date or not end_date:
            raise InvalidDateRangeError(
                "startDate and endDate are required unless the dates are TBD"
            )
        if is_one_day_event:
            end_date = start_date
        elif start_date >= end_date:
            raise InvalidDateRangeError("Start date must be before end date for multi-day events")

    slug = data.slug or slugify(data.name)
    ensure_slug_available(db, slug)

    convention = Convention(
        name=data.name,
        slug=slug,
        series_id=data.series_id,
        start_date=start_date,
        end_date=end_date,
        is_one_day_event=is_one_day_event,
        is_tbd=data.is_tbd,
        city=data.city,
        state_abbreviation=data.state_abbreviation,
        state_name=data.state_name,
        country=data.country,
        description_short=data.description_short,
        description_main=data.description_main,
        website_url=data.website_url,
        status=ConventionStatus.DRAFT,
    )
    db.add(convention)
    db.commit()
    db.refresh(convention)

    logger.info(f"Convention Created | Convention={convention.id} | Slug={convention.slug}")
    return convention


# =====================================================================
# STATUS / DELETE / RESTORE
# =====================================================================
def change_status(db: Session, convention_id: str, status: ConventionStatus) -> Convention:
    convention = get_active_convention(db, convention_id)
    convention.status = status
    convention.updated_at = datetime.utcnow()
    touch_series(db, convention.series_id)
    db.commit()
    db.refresh(convention)

    logger.info(f"Convention Status Changed | Convention={convention_id} | Status={status.value}")
    return convention


def soft_delete_convention(db: Session, convention_id: str) -> Convention:
    convention = get_active_convention(db, convention_id)

    # Free the slug for reuse while keeping it recoverable
    convention.slug = f"{convention.slug}{deleted_slug_suffix()}"
    convention.deleted_at = datetime.utcnow()
    db.commit()
    db.refresh(convention)

    logger.info(f"Convention Deleted | Convention={convention_id} | Slug={convention.slug}")
    return convention


def original_slug(current_slug: str):
    if DELETED_SUFFIX.search(current_slug):
        return DELETED_SUFFIX.sub("", current_slug)
    return None


def restore_convention(db: Session, convention_id: str) -> Convention:
    convention = db.query(Convention).filter(Convention.id == convention_id).first()
    if not convention:
        raise ConventionNotFoundError(convention_id)

    slug = original_slug(convention.slug) if convention.deleted_at else None
    if not slug:
        raise NotDeletedError()

    conflicting = (
        db.query(Convention)
        .filter(
            Convention.slug == slug,
            Convention.deleted_at.is_(None),
            Convention.id != convention_id,
        )
        .first()
    )
    if conflicting:
        raise RestoreConflictError(slug, conflicting.id, conflicting.name)

    convention.slug = slug
    convention.deleted_at = None
    db.commit()
    db.refresh(convention)

    logger.info(f"Convention Restored | Convention={convention_id} | Slug={slug}")
    return convention


# =====================================================================
# VENUES
# =====================================================================
def get_venue(db: Session, venue_id: str) -> Venue:
    venue = db.query(Venue).filter(Venue.id == venue_id).first()
    if not venue:
        raise VenueNotFoundError(venue_id)
    return venue


def delete_venue(db: Session, venue: Venue) -> None:
    venue_id, convention_id = venue.id, venue.convention_id

    delete_photos_for(db, VenuePhoto, [venue_id])
    db.delete(venue)
    db.commit()

    logger.info(f"Venue Deleted | Venue={venue_id} | Convention={convention_id}")


# =====================================================================
# LISTING / SEARCH
# =====================================================================
def list_organizer_conventions(db: Session, user, role: UserRole):
    query = db.query(Convention).filter(Convention.deleted_at.is_(None))
    if role != UserRole.ADMIN:
        query = query.join(ConventionSeries).filter(ConventionSeries.organizer_user_id == user.id)
    return query.order_by(Convention.start_date.desc()).all()


def parse_statuses(raw: str, allowed=PUBLIC_STATUSES):
    """Requested statuses narrowed to ``allowed``; the full allowed set when none survive."""
    if not raw:
        return list(allowed)
    statuses = []
    for part in raw.split(","):
        part = part.strip().upper()
        if part in ConventionStatus.__members__ and ConventionStatus[part] in allowed:
            statuses.append(ConventionStatus[part])
    return statuses or list(allowed)


def search_conventions(
    db: Session,
    query: str = "",
    city: str = "",
    state: str = "",
    country: str = "",
    start_date: date = None,
    end_date: date = None,
    status: str = "",
    page: int = 1,
    limit: int = 10,
):
    filters = [
        Convention.deleted_at.is_(None),
        Convention.status.in_(parse_statuses(status)),
    ]

    if query:
        pattern = f"%{query}%"
        filters.append(
            or_(
                Convention.name.ilike(pattern),
                Convention.city.ilike(pattern),
                Convention.state_name.ilike(pattern),
                Convention.state_abbreviation.ilike(pattern),
                Convention.country.ilike(pattern),
                Convention.description_short.ilike(pattern),
            )
        )

    if city:
        filters.append(Convention.city.ilike(f"%{city}%"))

    if state:
        variations = [v.lower() for v in state_variations(state)]
        filters.append(
            or_(
                func.lower(Convention.state_name).in_(variations),
                func.lower(Convention.state_abbreviation).in_(variations),
            )
        )

    if country:
        filters.append(Convention.country.ilike(f"%{country}%"))

    # Overlap with the requested window
    if start_date:
        filters.append(or_(Convention.end_date >= start_date, Convention.end_date.is_(None)))
    if end_date:
        filters.append(or_(Convention.start_date <= end_date, Convention.start_date.is_(None)))

    base = db.query(Convention).filter(and_(*filters))
    total = base.count()

    items = (
        base.order_by(Convention.start_date.asc(), Convention.name.asc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "items": items,
        "total": total,
        "page": page,
        "total_pages": math.ceil(total / limit) if total else 0,
    }


def get_public_convention(db: Session, slug: str) -> Convention:
    convention = (
        db.query(Convention)
        .filter(Convention.slug == slug, Convention.deleted_at.is_(None))
        .first()
    )
    if not convention:
        raise ConventionNotFoundError(slug)
    return convention
