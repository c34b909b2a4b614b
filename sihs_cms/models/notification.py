"""Notification model"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from sihs_cms.database import Base

NOTIFICATION_CATEGORIES = ("General", "Urgent", "Academic", "Event", "Maintenance")
PRIORITIES = ("Low", "Normal", "High", "Critical")
AUDIENCES = ("All", "Students", "Faculty", "Staff")


class Notification(Base):
    """A notice board entry, optionally targeted and optionally expiring"""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    category = Column(String(20), nullable=False, default="General")
    priority = Column(String(20), nullable=False, default="Normal")
    department = Column(String(255), nullable=False, default="")   # department id or name
    target_audience = Column(String(20), nullable=False, default="All", index=True)
    image_url = Column(String(1024), nullable=False, default="")
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
