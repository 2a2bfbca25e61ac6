from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, load_managed_convention, require_organizer
from app.core.logging_config import get_logger
from app.core.redis import convention_cache_key, delete_cache
from app.schemas.convention import (
    ConventionCreate,
    ConventionOut,
    ConventionStatusUpdate,
    ConventionSummaryOut,
    ConventionUpdate,
)
from app.services import conventions as convention_service
from app.services.convention_update import update_convention
from app.services.errors import DomainError, RestoreConflictError

router = APIRouter(prefix="/organizer/conventions", tags=["Organizer Conventions"])

logger = get_logger().bind(log_type="convention")


def domain_http_error(e: DomainError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


# =====================================================================
# CREATE
# =====================================================================
@router.post("/", response_model=ConventionOut, status_code=201)
def create_convention(
    data: ConventionCreate,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, role = principal
    try:
        return convention_service.create_convention(db, data, user, role)
    except DomainError as e:
        raise domain_http_error(e)


# =====================================================================
# LIST (own conventions, admin: all)
# =====================================================================
@router.get("/", response_model=list[ConventionSummaryOut])
def list_conventions(principal=Depends(require_organizer), db: Session = Depends(get_db)):
    user, role = principal
    return convention_service.list_organizer_conventions(db, user, role)


# =====================================================================
# GET ONE
# =====================================================================
@router.get("/{convention_id}", response_model=ConventionOut)
def get_convention(
    convention_id: str,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, role = principal
    return load_managed_convention(db, convention_id, user, role)


# =====================================================================
# UPDATE (full or image-only)
# =====================================================================
@router.put("/{convention_id}", response_model=ConventionOut)
def put_convention(
    convention_id: str,
    data: ConventionUpdate,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, role = principal
    convention = load_managed_convention(db, convention_id, user, role)
    old_slug = convention.slug

    try:
        # Moving to another series needs ownership of the target series too
        if "series_id" in data.model_fields_set and data.series_id != convention.series_id:
            convention_service.get_owned_series(db, data.series_id, user, role)

        convention = update_convention(db, convention_id, data)
    except DomainError as e:
        raise domain_http_error(e)
    except SQLAlchemyError as e:
        logger.error(f"Convention update DB error | Convention={convention_id} -> {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to update convention", "details": str(e)},
        )

    delete_cache(convention_cache_key(old_slug), convention_cache_key(convention.slug))
    return convention


# =====================================================================
# STATUS CHANGE
# =====================================================================
@router.patch("/{convention_id}", response_model=ConventionOut)
def patch_status(
    convention_id: str,
    data: ConventionStatusUpdate,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, role = principal
    load_managed_convention(db, convention_id, user, role)

    try:
        convention = convention_service.change_status(db, convention_id, data.status)
    except DomainError as e:
        raise domain_http_error(e)

    delete_cache(convention_cache_key(convention.slug))
    return convention


# =====================================================================
# SOFT DELETE
# =====================================================================
@router.delete("/{convention_id}")
def delete_convention(
    convention_id: str,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, role = principal
    convention = load_managed_convention(db, convention_id, user, role)
    old_slug = convention.slug

    try:
        convention_service.soft_delete_convention(db, convention_id)
    except DomainError as e:
        raise domain_http_error(e)

    delete_cache(convention_cache_key(old_slug))
    return {"message": "Convention deleted successfully"}


# =====================================================================
# RESTORE
# =====================================================================
@router.patch("/{convention_id}/restore", response_model=ConventionOut)
def restore_convention(
    convention_id: str,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, role = principal
    load_managed_convention(db, convention_id, user, role, include_deleted=True)

    try:
        convention = convention_service.restore_convention(db, convention_id)
    except RestoreConflictError as e:
        raise HTTPException(
            status_code=e.status_code,
            detail={"message": e.message, "conflictingConventionId": e.conflicting_id},
        )
    except DomainError as e:
        raise domain_http_error(e)

    delete_cache(convention_cache_key(convention.slug))
    return convention
