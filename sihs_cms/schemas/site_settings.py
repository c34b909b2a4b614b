"""Site settings schemas"""
from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel

Theme = Literal["default", "dark", "light"]


class MapLocation(CamelModel):
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    zoom: Optional[int] = Field(None, ge=0, le=22)


class SocialLinks(CamelModel):
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    youtube: Optional[str] = None


class OpeningHours(CamelModel):
    monday_friday: Optional[str] = None
    saturday: Optional[str] = None
    sunday: Optional[str] = None


class SiteSettingsPatch(CamelModel):
    """Partial update; nested groups are merged key by key"""

    theme: Optional[Theme] = None
    school_name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, min_length=1, max_length=512)
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    email: Optional[str] = Field(None, min_length=3, max_length=255)
    website: Optional[str] = None
    logo: Optional[str] = None
    favicon: Optional[str] = None
    map_embed_url: Optional[str] = None
    map_location: Optional[MapLocation] = None
    social_links: Optional[SocialLinks] = None
    opening_hours: Optional[OpeningHours] = None


class SiteSettingsSave(SiteSettingsPatch):
    """Full save from the settings form: name, address and email are required"""

    school_name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=512)
    email: str = Field(..., min_length=3, max_length=255)


class SiteSettingsResponse(CamelModel):
    id: int
    theme: str
    school_name: str
    address: str
    phone: str
    whatsapp: str
    email: str
    website: str
    logo: str
    favicon: str
    map_embed_url: str
    map_location: Dict[str, Any]
    social_links: Dict[str, Any]
    opening_hours: Dict[str, Any]
    created_at: datetime
    updated_at: datetime
