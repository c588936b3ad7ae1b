from studylist.models.study_item import StudyItemRecord
from studylist.models.revision_history import RevisionEntry

__all__ = [
    "StudyItemRecord",
    "RevisionEntry"
]
