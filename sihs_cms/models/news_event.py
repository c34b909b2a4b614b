"""NewsEvent model"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from sihs_cms.database import Base

NEWS_CATEGORIES = ("News", "Event", "Announcement")
EVENT_TYPES = ("Other", "Seminar", "Workshop", "Conference", "Celebration", "Meeting")


class NewsEvent(Base):
    """A news item, event or announcement"""

    __tablename__ = "news_events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    category = Column(String(20), nullable=False, default="News")
    location = Column(String(255), nullable=False, default="")
    start_time = Column(String(20), nullable=False, default="")
    end_time = Column(String(20), nullable=False, default="")
    event_type = Column(String(20), nullable=False, default="Other")
    image_url = Column(String(1024), nullable=False, default="")
    facebook_embed_url = Column(String(1024), nullable=False, default="")
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
