"""SiteSettings model: a single row holding the institution's public contact details"""
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Integer, String

from sihs_cms.database import Base

THEMES = ("default", "dark", "light")

DEFAULT_MAP_LOCATION = {"latitude": 32.08237311905389, "longitude": 72.67886211039271, "zoom": 15}
DEFAULT_OPENING_HOURS = {
    "mondayFriday": "09:00 AM - 05:00 PM",
    "saturday": "10:00 AM - 03:00 PM",
    "sunday": "Closed",
}

# Values the settings row is created with when none exists yet
DEFAULT_SITE_SETTINGS = {
    "theme": "default",
    "school_name": "SIHS",
    "address": "117-C Zafar Ullah Rd, Satellite Town, Sargodha, 40100",
    "phone": "0483252717",
    "whatsapp": "0335 7550755",
    "email": "sihs.edu.pk@gmail.com",
    "website": "",
    "logo": "/images/logo.png",
    "favicon": "",
    "map_embed_url": "",
    "social_links": {
        "facebook": "https://www.facebook.com/sihs.edu.pk/",
        "instagram": "https://www.instagram.com/sihs.edu.pk/",
    },
}


class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True)
    theme = Column(String(20), nullable=False, default="default")
    school_name = Column(String(255), nullable=False, default="SIHS")
    address = Column(String(512), nullable=False)
    phone = Column(String(50), nullable=False, default="")
    whatsapp = Column(String(50), nullable=False, default="")
    email = Column(String(255), nullable=False)
    website = Column(String(1024), nullable=False, default="")
    logo = Column(String(1024), nullable=False, default="/images/logo.png")
    favicon = Column(String(1024), nullable=False, default="")
    map_embed_url = Column(String(2048), nullable=False, default="")
    map_location = Column(JSON, nullable=False, default=lambda: dict(DEFAULT_MAP_LOCATION))
    social_links = Column(JSON, nullable=False, default=dict)
    opening_hours = Column(JSON, nullable=False, default=lambda: dict(DEFAULT_OPENING_HOURS))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
