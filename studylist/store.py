"""Durable storage for the study item collection.

The store mirrors the in-memory list verbatim. Failures never reach the
caller: ``load`` falls back to an empty collection and ``save`` reports
``False``; both are logged.
"""

from typing import Callable, List, Sequence

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studylist.crud import get_study_items, replace_study_items
from studylist.database import SessionLocal
from studylist.logging import logger
from studylist.schemas import StudyItem


class StudyItemStore:
    """Load/save the whole collection through a SQLAlchemy session factory."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal) -> None:
        self.session_factory = session_factory

    def load(self) -> List[StudyItem]:
        db = self.session_factory()
        try:
            items = get_study_items(db)
        except (SQLAlchemyError, ValidationError) as exc:
            logger.error(
                "study_items_load_failed",
                error=str(exc),
                error_class=exc.__class__.__name__,
            )
            return []
        finally:
            db.close()
        logger.debug("study_items_loaded", count=len(items))
        return items

    def save(self, items: Sequence[StudyItem]) -> bool:
        db = self.session_factory()
        try:
            replace_study_items(db, items)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(
                "study_items_save_failed",
                count=len(items),
                error=str(exc),
                error_class=exc.__class__.__name__,
            )
            return False
        finally:
            db.close()
        logger.debug("study_items_saved", count=len(items))
        return True
