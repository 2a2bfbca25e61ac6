"""Venue and hotel reconciliation for the convention update workflow.

Order of operations for one update:

1. promotion: a secondary venue marked for promotion becomes the primary
   payload, and the current primary (if persisted) joins the secondaries
2. primary venue upsert, then primary hotel logic
3. secondary venues and additional hotels are synced against the
   non-primary rows left after step 2

All writes happen on the caller's session; committing is the caller's job.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.logging_config import get_logger
from app.models.convention import Convention
from app.models.hotel import Hotel
from app.models.photos import HotelPhoto, VenuePhoto
from app.models.venue import Venue
from app.schemas.venue_hotel import HotelIn, VenueHotelIn, VenueIn
from app.services.collections import apply_sync
from app.services.photos import delete_photos_for, first_photo, reconcile_photo

logger = get_logger().bind(log_type="convention")

LOCATION_FIELDS = (
    "description",
    "website_url",
    "google_maps_url",
    "street_address",
    "city",
    "state_region",
    "postal_code",
    "country",
    "contact_email",
    "contact_phone",
    "parking_info",
    "public_transport_info",
    "overall_accessibility_notes",
)

VENUE_FIELDS = ("venue_name",) + LOCATION_FIELDS

HOTEL_FIELDS = ("hotel_name",) + LOCATION_FIELDS + (
    "group_rate_or_booking_code",
    "group_price",
    "booking_link",
    "booking_cutoff_date",
)


# ---------------------------------------------------------------------
# FIELD COPYING
# ---------------------------------------------------------------------
def _copy_fields(row, payload, fields):
    for name in fields:
        setattr(row, name, getattr(payload, name))
    row.amenities = list(payload.amenities)


def apply_venue_fields(row: Venue, payload: VenueIn, is_primary: bool) -> None:
    _copy_fields(row, payload, VENUE_FIELDS)
    row.is_primary_venue = is_primary


def apply_hotel_fields(row: Hotel, payload: HotelIn, is_primary: bool) -> None:
    _copy_fields(row, payload, HOTEL_FIELDS)
    row.is_primary_hotel = is_primary
    # A primary hotel is by definition somewhere other than the venue
    row.is_at_primary_venue_location = False if is_primary else payload.is_at_primary_venue_location


def _sync_photo(db: Session, photo_model, row, payload) -> None:
    # photos=None means the client did not touch the photo
    if payload.photos is not None:
        reconcile_photo(db, photo_model, row.id, first_photo(payload.photos))


# ---------------------------------------------------------------------
# PROMOTION
# ---------------------------------------------------------------------
def apply_venue_promotion(
    primary: Optional[VenueIn],
    secondaries: Optional[List[VenueIn]],
) -> Tuple[Optional[VenueIn], Optional[List[VenueIn]]]:
    """Swap in a secondary venue marked for promotion.

    Pure payload reshaping: nothing is persisted here. The promoted entry is
    removed from the secondaries and returned as the new primary payload; the
    old primary is appended to the secondaries only if it was persisted.
    """
    if not secondaries:
        return primary, secondaries

    index = next(
        (i for i, venue in enumerate(secondaries) if venue.marked_for_primary_promotion),
        None,
    )
    if index is None:
        return primary, secondaries

    remaining = list(secondaries)
    promoted = remaining.pop(index).model_copy(update={"marked_for_primary_promotion": False})

    if primary is not None and primary.id:
        remaining.append(primary)

    return promoted, remaining


# ---------------------------------------------------------------------
# PRIMARY ENTITIES
# ---------------------------------------------------------------------
def _find_owned(db: Session, model, convention_id: str, entity_id: Optional[str]):
    if not entity_id:
        return None
    return (
        db.query(model)
        .filter(model.id == entity_id, model.convention_id == convention_id)
        .first()
    )


def upsert_primary_venue(db: Session, convention_id: str, payload: VenueIn) -> Venue:
    venue = _find_owned(db, Venue, convention_id, payload.id)
    if venue is None:
        venue = Venue(convention_id=convention_id)
        db.add(venue)

    apply_venue_fields(venue, payload, is_primary=True)
    db.flush()

    db.query(Venue).filter(
        Venue.convention_id == convention_id,
        Venue.is_primary_venue.is_(True),
        Venue.id != venue.id,
    ).update({Venue.is_primary_venue: False}, synchronize_session="fetch")

    _sync_photo(db, VenuePhoto, venue, payload)
    return venue


def reconcile_primary_hotel(
    db: Session,
    convention: Convention,
    payload: Optional[HotelIn],
) -> Optional[Hotel]:
    if convention.guests_stay_at_primary_venue:
        # No primary hotel while guests lodge at the venue, even if details were sent
        db.query(Hotel).filter(
            Hotel.convention_id == convention.id,
            Hotel.is_primary_hotel.is_(True),
        ).update(
            {Hotel.is_primary_hotel: False, Hotel.is_at_primary_venue_location: True},
            synchronize_session="fetch",
        )
        return None

    if payload is None:
        return None

    demote = db.query(Hotel).filter(
        Hotel.convention_id == convention.id,
        Hotel.is_primary_hotel.is_(True),
    )
    if payload.id:
        demote = demote.filter(Hotel.id != payload.id)
    demote.update({Hotel.is_primary_hotel: False}, synchronize_session="fetch")

    hotel = _find_owned(db, Hotel, convention.id, payload.id)
    if hotel is None:
        hotel = Hotel(convention_id=convention.id)
        db.add(hotel)

    apply_hotel_fields(hotel, payload, is_primary=True)
    db.flush()

    _sync_photo(db, HotelPhoto, hotel, payload)
    return hotel


def _primary_id(db: Session, model, flag, convention_id: str) -> Optional[str]:
    row = db.query(model.id).filter(model.convention_id == convention_id, flag.is_(True)).first()
    return row[0] if row else None


# ---------------------------------------------------------------------
# COLLECTIONS
# ---------------------------------------------------------------------
def reconcile_secondary_venues(db: Session, convention_id: str, payloads: List[VenueIn]) -> List[Venue]:
    primary_id = _primary_id(db, Venue, Venue.is_primary_venue, convention_id)
    existing = (
        db.query(Venue)
        .filter(Venue.convention_id == convention_id, Venue.is_primary_venue.is_(False))
        .all()
    )
    return apply_sync(
        db,
        Venue,
        "convention_id",
        convention_id,
        existing,
        payloads,
        lambda row, payload: apply_venue_fields(row, payload, is_primary=False),
        skip_ids=[primary_id],
        before_delete=lambda ids: delete_photos_for(db, VenuePhoto, ids),
        after_upsert=lambda row, payload: _sync_photo(db, VenuePhoto, row, payload),
    )


def reconcile_additional_hotels(db: Session, convention_id: str, payloads: List[HotelIn]) -> List[Hotel]:
    primary_id = _primary_id(db, Hotel, Hotel.is_primary_hotel, convention_id)
    existing = (
        db.query(Hotel)
        .filter(Hotel.convention_id == convention_id, Hotel.is_primary_hotel.is_(False))
        .all()
    )
    return apply_sync(
        db,
        Hotel,
        "convention_id",
        convention_id,
        existing,
        payloads,
        lambda row, payload: apply_hotel_fields(row, payload, is_primary=False),
        skip_ids=[primary_id],
        before_delete=lambda ids: delete_photos_for(db, HotelPhoto, ids),
        after_upsert=lambda row, payload: _sync_photo(db, HotelPhoto, row, payload),
    )


# ---------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------
def reconcile_venue_hotel(db: Session, convention: Convention, payload: VenueHotelIn) -> None:
    logger.info(f"Venue/hotel reconciliation started | Convention={convention.id}")

    primary_venue, secondary_venues = apply_venue_promotion(
        payload.primary_venue, payload.secondary_venues
    )

    if primary_venue is not None:
        upsert_primary_venue(db, convention.id, primary_venue)

    reconcile_primary_hotel(db, convention, payload.primary_hotel_details)

    venues = hotels = None
    if secondary_venues is not None:
        venues = reconcile_secondary_venues(db, convention.id, secondary_venues)
    if payload.hotels is not None:
        hotels = reconcile_additional_hotels(db, convention.id, payload.hotels)

    logger.info(
        f"Venue/hotel reconciliation finished | Convention={convention.id} "
        f"| SecondaryVenues={'untouched' if venues is None else len(venues)} "
        f"| AdditionalHotels={'untouched' if hotels is None else len(hotels)}"
    )
