from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session, joinedload

from app.db.session import SessionLocal
from app.core.auth_utils import decode_token
from app.models.convention import Convention
from app.models.enums import UserRole
from app.models.user import User

security = HTTPBearer()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_principal(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
):
    token = credentials.credentials  # Extract JWT token

    payload = decode_token(token)

    try:
        role = UserRole(payload["role"])
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid role"
        )

    user = db.query(User).filter(User.email == payload["sub"]).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    # Token role must still match the stored role
    if user.role != role:
        raise HTTPException(status_code=401, detail="Role changed, please log in again")

    return user, role


def require_organizer(principal=Depends(get_current_principal)):
    user, role = principal
    if role not in (UserRole.ADMIN, UserRole.ORGANIZER):
        raise HTTPException(status_code=403, detail="Organizers only")
    return user, role


def can_manage(convention: Convention, user: User, role: UserRole) -> bool:
    if role == UserRole.ADMIN:
        return True
    if role == UserRole.ORGANIZER:
        return convention.series is not None and convention.series.organizer_user_id == user.id
    return False


def load_managed_convention(
    db: Session,
    convention_id: str,
    user: User,
    role: UserRole,
    include_deleted: bool = False,
) -> Convention:
    """404 when missing (or soft-deleted), 403 when the caller does not own it."""
    query = (
        db.query(Convention)
        .options(joinedload(Convention.series))
        .filter(Convention.id == convention_id)
    )
    if not include_deleted:
        query = query.filter(Convention.deleted_at.is_(None))

    convention = query.first()
    if not convention:
        raise HTTPException(status_code=404, detail="Convention not found or has been deleted")

    if not can_manage(convention, user, role):
        raise HTTPException(status_code=403, detail="Forbidden")

    return convention
