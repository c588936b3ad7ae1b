"""In-memory study item collection with write-through persistence.

``StudyList`` is the single authority for the current items. Every mutation
(add, complete, revise, clear) is applied in memory first and then mirrored
to the store; storage never flows back except through an explicit ``load``.
"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

from studylist.exceptions import ItemNotFoundError
from studylist.id_factory import generate_item_id
from studylist.logging import logger
from studylist.scheduler import ReviewScheduler, get_review_scheduler
from studylist.schemas import StudyItem, StudyTabs
from studylist.store import StudyItemStore


class StudyList:
    def __init__(
        self,
        store: StudyItemStore,
        scheduler: Optional[ReviewScheduler] = None,
        id_factory: Callable[[], str] = generate_item_id,
    ) -> None:
        self.store = store
        self.scheduler = scheduler or get_review_scheduler()
        self.id_factory = id_factory
        self._items: List[StudyItem] = []

    @property
    def items(self) -> Tuple[StudyItem, ...]:
        return tuple(self._items)

    def load(self) -> "StudyList":
        self._items = list(self.store.load())
        return self

    def get(self, item_id: str) -> StudyItem:
        return self._items[self._index_of(item_id)]

    def add(self, text: str) -> Optional[StudyItem]:
        """Add a new study item; blank text is ignored and returns None."""
        if not text or not text.strip():
            return None
        item = StudyItem(id=self.id_factory(), text=text)
        self._items.append(item)
        logger.info("study_item_added", item_id=item.id)
        self._sync()
        return item

    def complete(self, item_id: str, now: Optional[datetime] = None) -> StudyItem:
        index = self._index_of(item_id)
        item = self.scheduler.apply_completion(self._items[index], now)
        self._items[index] = item
        logger.info("study_item_completed", item_id=item_id, next_review_date=item.next_review_date.isoformat())
        self._sync()
        return item

    def revise(self, item_id: str, now: Optional[datetime] = None) -> StudyItem:
        index = self._index_of(item_id)
        item = self.scheduler.apply_revision(self._items[index], now)
        self._items[index] = item
        logger.info(
            "study_item_revised",
            item_id=item_id,
            repetitions=item.repetitions,
            next_review_date=item.next_review_date.isoformat(),
        )
        self._sync()
        return item

    def clear(self) -> None:
        removed = len(self._items)
        self._items = []
        logger.info("study_items_cleared", count=removed)
        self._sync()

    def tabs(self, now: Optional[datetime] = None) -> StudyTabs:
        return self.scheduler.classify(self._items, now)

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    def _sync(self) -> None:
        # Best effort: a failed save leaves the in-memory state authoritative.
        self.store.save(self._items)
