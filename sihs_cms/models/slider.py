"""Slider model"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from sihs_cms.database import Base


class Slider(Base):
    """A home page carousel slide. Lower ``order`` is shown first."""

    __tablename__ = "sliders"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(1024), nullable=False)
    button_text = Column(String(100), nullable=False, default="Learn More")
    button_link = Column(String(1024), nullable=False, default="/")
    order = Column(Integer, nullable=False, default=0, index=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    auto_play = Column(Boolean, default=True, nullable=False)
    auto_play_interval = Column(Integer, nullable=False, default=5000)   # milliseconds
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
