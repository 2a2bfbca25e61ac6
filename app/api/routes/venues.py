from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.routes.organizer_conventions import domain_http_error
from app.core.dependencies import get_db, load_managed_convention, require_organizer
from app.core.redis import convention_cache_key, delete_cache
from app.services.conventions import delete_venue, get_venue
from app.services.errors import DomainError

router = APIRouter(prefix="/organizer/venues", tags=["Organizer Venues"])


@router.delete("/{venue_id}")
def remove_venue(
    venue_id: str,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, role = principal

    try:
        venue = get_venue(db, venue_id)
    except DomainError as e:
        raise domain_http_error(e)

    # Ownership goes through the parent convention
    convention = load_managed_convention(db, venue.convention_id, user, role)
    slug = convention.slug

    delete_venue(db, venue)
    delete_cache(convention_cache_key(slug))
    return {"message": "Venue deleted successfully"}
