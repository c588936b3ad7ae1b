from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from studylist.database import Base

class StudyItemRecord(Base):
    """Persisted study item; position keeps the insertion order"""
    __tablename__ = "study_items"
    
    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    text = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    repetitions = Column(Integer, nullable=False, default=0)
    
    last_completed = Column(DateTime(timezone=True))
    next_review_date = Column(DateTime(timezone=True))
    
    history = relationship(
        "RevisionEntry",
        back_populates="study_item",
        order_by="RevisionEntry.position",
        cascade="all, delete-orphan"
    )
