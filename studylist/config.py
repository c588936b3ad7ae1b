from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List, Literal

# Get the project root directory (parent of studylist folder)
PROJECT_ROOT = Path(__file__).parent.parent

class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""
    database_url: str = "sqlite:///./study_list.db"
    
    # Review scheduling
    review_intervals_days: List[int] = [1, 2, 3, 7]  # days per repetition count
    overflow_policy: Literal["clamp", "geometric"] = "clamp"
    schedule_first_review: bool = False  # False: completed items are due immediately
    max_interval_days: int = Field(default=365, ge=1)  # ceiling for geometric growth
    
    # Logging
    log_level: str = "WARNING"  # INFO shows study_item_* events
    log_json: bool = True
    
    @field_validator("review_intervals_days")
    @classmethod
    def check_intervals(cls, v):
        if not v:
            raise ValueError("review_intervals_days must not be empty")
        if any(days < 1 for days in v):
            raise ValueError("review intervals must be at least 1 day")
        return v
    
    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_prefix = "STUDY_LIST_"

settings = Settings()
