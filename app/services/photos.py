"""Single-photo reconciliation for venues and hotels.

A venue or hotel keeps at most one photo. Submitting a photo replaces whatever
was stored before; submitting nothing (or an empty url) removes it.
"""

from typing import List, Optional, Type, Union

from sqlalchemy.orm import Session

from app.models.photos import HotelPhoto, VenuePhoto
from app.schemas.venue_hotel import PhotoIn

PhotoModel = Union[Type[VenuePhoto], Type[HotelPhoto]]

PARENT_KEYS = {
    VenuePhoto: "venue_id",
    HotelPhoto: "hotel_id",
}


def first_photo(photos: Optional[List[PhotoIn]]) -> Optional[PhotoIn]:
    return photos[0] if photos else None


def reconcile_photo(
    db: Session,
    photo_model: PhotoModel,
    parent_id: str,
    payload: Optional[PhotoIn],
):
    """Leave ``parent_id`` with zero or one photo matching ``payload``.

    Returns the kept photo row, or None when every photo was removed.
    """
    parent_column = getattr(photo_model, PARENT_KEYS[photo_model])
    existing = db.query(photo_model).filter(parent_column == parent_id)

    if payload is None or not payload.url:
        existing.delete(synchronize_session="fetch")
        return None

    keep_id = payload.id
    stale = existing
    if keep_id:
        stale = stale.filter(photo_model.id != keep_id)
    stale.delete(synchronize_session="fetch")

    photo = None
    if keep_id:
        photo = (
            db.query(photo_model)
            .filter(photo_model.id == keep_id, parent_column == parent_id)
            .first()
        )

    if photo is None:
        # Unknown or foreign id: always a fresh row for this parent
        photo = photo_model(**{PARENT_KEYS[photo_model]: parent_id})
        db.add(photo)

    photo.url = payload.url
    photo.caption = payload.caption or None
    db.flush()
    return photo


def delete_photos_for(db: Session, photo_model: PhotoModel, parent_ids) -> int:
    if not parent_ids:
        return 0
    parent_column = getattr(photo_model, PARENT_KEYS[photo_model])
    return (
        db.query(photo_model)
        .filter(parent_column.in_(list(parent_ids)))
        .delete(synchronize_session="fetch")
    )
