import os

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.core.jwt import create_user_token
from app.core.logging_config import get_logger
from app.core.security import hash_password, verify_password
from app.models.enums import UserRole
from app.models.user import User
from app.schemas.user import AdminCreate, UserCreate, UserLogin, UserOut

router = APIRouter(prefix="/auth", tags=["Authentication"])

logger = get_logger().bind(log_type="auth")


def _create_user(db: Session, name: str, email: str, password: str, role: UserRole) -> User:
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="User already exists")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"User Registered | Email={email} | Role={role.value}")
    return user


# =====================================================================
#                           REGISTER
# =====================================================================
@router.post("/register", response_model=UserOut, status_code=201)
def register(data: UserCreate, db: Session = Depends(get_db)):
    return _create_user(db, data.name, data.email, data.password, UserRole(data.role))


# =====================================================================
#                           ADMIN REGISTER
# =====================================================================
@router.post("/admin/register", response_model=UserOut, status_code=201)
def admin_register(
    data: AdminCreate,
    x_admin_key: str = Header(default=None),
    db: Session = Depends(get_db)
):
    expected = os.getenv("ADMIN_REGISTRATION_KEY")
    if not expected or x_admin_key != expected:
        logger.warning(f"Admin registration rejected | Email={data.email}")
        raise HTTPException(status_code=403, detail="Invalid admin registration key")

    return _create_user(db, data.name, data.email, data.password, UserRole.ADMIN)


# =====================================================================
#                           LOGIN
# =====================================================================
@router.post("/login")
def login(data: UserLogin, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == data.email).first()

    if not user or not verify_password(data.password, user.password_hash):
        logger.warning(f"Login failed | Email={data.email}")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_user_token(user)
    logger.info(f"Login | Email={user.email} | Role={user.role.value}")

    return {
        "access_token": token,
        "role": user.role.value,
        "token_type": "bearer"
    }
