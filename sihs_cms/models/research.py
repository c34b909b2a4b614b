"""Research model"""
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from sihs_cms.database import Base

RESEARCH_STATUSES = ("Draft", "Published", "Under Review")


class Research(Base):
    __tablename__ = "research"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)     # abstract
    authors = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default="Draft", index=True)
    file_url = Column(String(1024), nullable=False, default="")
    published_date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    views = Column(Integer, nullable=False, default=0)
    downloads = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
