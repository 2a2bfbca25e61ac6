from datetime import timedelta

from sqlalchemy.orm import Session

from app.models.convention import Convention
from app.models.schedule_day import ScheduleDay


def realign_schedule_days(db: Session, convention: Convention) -> int:
    """Mark schedule days official iff they fall inside the convention's dates.

    Returns the number of days whose flag changed. Nothing happens while
    either date is unset.
    """
    if convention.start_date is None or convention.end_date is None:
        return 0

    changed = 0
    days = db.query(ScheduleDay).filter(ScheduleDay.convention_id == convention.id).all()
    for day in days:
        actual = convention.start_date + timedelta(days=day.day_offset)
        official = convention.start_date <= actual <= convention.end_date
        if day.is_official != official:
            day.is_official = official
            changed += 1

    if changed:
        db.flush()
    return changed
