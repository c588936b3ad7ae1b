from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence

from studylist.config import settings
from studylist.exceptions import InvalidStateError
from studylist.schemas import COMPLETED, REVISED, RevisionHistory, StudyItem, StudyTabs

REVIEW_INTERVALS_DAYS = (1, 2, 3, 7)
MAX_INTERVAL_DAYS = 365
OVERFLOW_POLICIES = ("clamp", "geometric")


def get_review_scheduler():
    """Factory function to return a scheduler configured from settings"""
    return ReviewScheduler(
        intervals_days=tuple(settings.review_intervals_days),
        overflow_policy=settings.overflow_policy,
        schedule_first_review=settings.schedule_first_review,
        max_interval_days=settings.max_interval_days,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReviewScheduler:
    """
    Fixed-table spaced repetition scheduler for study items.

    Repetition n waits intervals_days[n - 1] days after the last completion.
    Counts past the end of the table follow the overflow policy:
    "clamp" keeps the last interval, "geometric" doubles it per extra
    repetition up to max_interval_days.
    """

    def __init__(
        self,
        intervals_days: Sequence[int] = REVIEW_INTERVALS_DAYS,
        overflow_policy: str = "clamp",
        schedule_first_review: bool = False,
        max_interval_days: int = MAX_INTERVAL_DAYS
    ):
        if not intervals_days:
            raise ValueError("intervals_days must contain at least one interval")
        if any(days < 1 for days in intervals_days):
            raise ValueError("review intervals must be at least 1 day")
        if max_interval_days < 1:
            raise ValueError("max_interval_days must be at least 1 day")
        if overflow_policy not in OVERFLOW_POLICIES:
            raise ValueError(f"Unknown overflow policy: {overflow_policy}")
        self.intervals_days = tuple(intervals_days)
        self.overflow_policy = overflow_policy
        self.schedule_first_review = schedule_first_review
        self.max_interval_days = max_interval_days

    def interval_for(self, repetitions: int) -> int:
        """
        Look up the review interval for a repetition count.

        Args:
            repetitions: Number of completions/revisions so far (>= 1)

        Returns:
            Interval in days
        """
        if repetitions < 1:
            raise ValueError(f"repetitions must be >= 1, got {repetitions}")

        if repetitions <= len(self.intervals_days):
            return self.intervals_days[repetitions - 1]

        last = self.intervals_days[-1]
        if self.overflow_policy == "geometric":
            # Never shorter than the last table entry, never longer than the ceiling
            ceiling = max(self.max_interval_days, last)
            doublings = repetitions - len(self.intervals_days)
            if doublings >= ceiling.bit_length():
                return ceiling
            return min(last * 2 ** doublings, ceiling)
        return last

    def compute_next_review_date(self, last_completed: datetime, repetitions: int) -> datetime:
        """Shift last_completed forward by the interval, keeping the time of day"""
        return last_completed + timedelta(days=self.interval_for(repetitions))

    def apply_completion(self, item: StudyItem, now: Optional[datetime] = None) -> StudyItem:
        """
        Mark a not-yet-completed item as completed for the first time.

        The item becomes due immediately unless schedule_first_review is set,
        in which case the first interval from the table applies.

        Returns:
            Updated copy of the item; the input is left untouched
        """
        if item.completed:
            raise InvalidStateError(item.id, "Item is already completed")

        now = now or _utcnow()
        if self.schedule_first_review:
            next_review = self.compute_next_review_date(now, 1)
        else:
            next_review = now

        return item.model_copy(update={
            "completed": True,
            "repetitions": 1,
            "last_completed": now,
            "next_review_date": next_review,
            "history": [*item.history, RevisionHistory(date=now.isoformat(), action=COMPLETED)],
        })

    def apply_revision(self, item: StudyItem, now: Optional[datetime] = None) -> StudyItem:
        """
        Record a revision of a completed item and schedule the next one.

        Returns:
            Updated copy of the item with repetitions and history advanced by one
        """
        if not item.completed:
            raise InvalidStateError(item.id, "Cannot revise an item that has not been completed")

        now = now or _utcnow()
        repetitions = item.repetitions + 1

        return item.model_copy(update={
            "repetitions": repetitions,
            "last_completed": now,
            "next_review_date": self.compute_next_review_date(now, repetitions),
            "history": [*item.history, RevisionHistory(date=now.isoformat(), action=REVISED)],
        })

    @staticmethod
    def is_due(item: StudyItem, now: Optional[datetime] = None) -> bool:
        """Check if a completed item is due for revision"""
        if not item.completed or item.next_review_date is None:
            return False
        return item.next_review_date <= (now or _utcnow())

    @staticmethod
    def days_overdue(item: StudyItem, now: Optional[datetime] = None) -> int:
        """Calculate how many whole days past its review date an item is"""
        if not ReviewScheduler.is_due(item, now):
            return 0
        return ((now or _utcnow()) - item.next_review_date).days

    def classify(self, items: Iterable[StudyItem], now: Optional[datetime] = None) -> StudyTabs:
        """
        Split the collection into the Today, Completed and To-revise views.

        A completed item that is due shows up in both completed and to_revise.
        Each view lists the most recently added item first.
        """
        now = now or _utcnow()
        newest_first = list(reversed(list(items)))

        return StudyTabs(
            today=[item for item in newest_first if not item.completed],
            completed=[item for item in newest_first if item.completed],
            to_revise=[item for item in newest_first if self.is_due(item, now)],
        )
