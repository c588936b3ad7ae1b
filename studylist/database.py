from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from studylist.config import settings

connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autoflush=False, bind=engine)

Base = declarative_base()

def init_db(bind=None):
    """Create all tables"""
    import studylist.models  # noqa: F401 - registers tables on Base.metadata
    Base.metadata.create_all(bind=bind or engine)
