from sqlalchemy.orm import Session
from studylist.models import StudyItemRecord, RevisionEntry
from studylist.schemas import StudyItem
from datetime import datetime, timezone
from typing import List, Optional, Sequence

def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; stored timestamps are always UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

def get_study_items(db: Session) -> List[StudyItem]:
    """Get all study items in insertion order"""
    records = db.query(StudyItemRecord).order_by(StudyItemRecord.position).all()
    items = []
    for record in records:
        item = StudyItem.model_validate(record)
        items.append(item.model_copy(update={
            "last_completed": _as_utc(item.last_completed),
            "next_review_date": _as_utc(item.next_review_date),
        }))
    return items

def replace_study_items(db: Session, items: Sequence[StudyItem]) -> None:
    """Replace the stored collection with items, preserving their order"""
    db.query(RevisionEntry).delete(synchronize_session=False)
    db.query(StudyItemRecord).delete(synchronize_session=False)
    db.expunge_all()
    
    for position, item in enumerate(items):
        record = StudyItemRecord(
            id=item.id,
            position=position,
            text=item.text,
            completed=item.completed,
            repetitions=item.repetitions,
            last_completed=item.last_completed,
            next_review_date=item.next_review_date,
            history=[
                RevisionEntry(position=index, date=entry.date, action=entry.action)
                for index, entry in enumerate(item.history)
            ]
        )
        db.add(record)
    
    db.commit()
