from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from studylist.database import Base

class RevisionEntry(Base):
    """One completion/revision event of a study item"""
    __tablename__ = "revision_history"
    
    id = Column(Integer, primary_key=True, index=True)
    study_item_id = Column(String, ForeignKey("study_items.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    
    date = Column(String, nullable=False)  # ISO-8601
    action = Column(String, nullable=False)  # "Completed" or "Revised"
    
    study_item = relationship("StudyItemRecord", back_populates="history")
