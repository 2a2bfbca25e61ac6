from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, require_organizer
from app.core.logging_config import get_logger
from app.models.convention_series import ConventionSeries
from app.models.enums import UserRole
from app.schemas.convention import SeriesCreate, SeriesOut

router = APIRouter(prefix="/organizer/series", tags=["Organizer Series"])

logger = get_logger().bind(log_type="convention")


@router.post("/", response_model=SeriesOut, status_code=201)
def create_series(
    data: SeriesCreate,
    principal=Depends(require_organizer),
    db: Session = Depends(get_db)
):
    user, _ = principal

    series = ConventionSeries(name=data.name, organizer_user_id=user.id)
    db.add(series)
    db.commit()
    db.refresh(series)

    logger.info(f"Series Created | Series={series.id} | Organizer={user.id}")
    return series


@router.get("/", response_model=list[SeriesOut])
def list_series(principal=Depends(require_organizer), db: Session = Depends(get_db)):
    user, role = principal

    query = db.query(ConventionSeries)
    if role != UserRole.ADMIN:
        query = query.filter(ConventionSeries.organizer_user_id == user.id)

    return query.order_by(ConventionSeries.name.asc()).all()
