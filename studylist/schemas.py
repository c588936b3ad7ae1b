from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

COMPLETED = "Completed"
REVISED = "Revised"

class RevisionHistory(BaseModel):
    """Audit entry for a single completion or revision event"""
    date: str  # ISO-8601 timestamp
    action: Literal["Completed", "Revised"]
    
    class Config:
        frozen = True
        from_attributes = True

class StudyItem(BaseModel):
    """A study topic tracked by the to-do list"""
    id: str
    text: str
    completed: bool = False
    repetitions: int = Field(default=0, ge=0)
    last_completed: Optional[datetime] = None
    next_review_date: Optional[datetime] = None  # only consulted once completed
    history: List[RevisionHistory] = Field(default_factory=list)
    
    class Config:
        from_attributes = True

class StudyTabs(BaseModel):
    """Derived views over the item collection, newest first"""
    today: List[StudyItem]
    completed: List[StudyItem]
    to_revise: List[StudyItem]
