"""NewsEvent schemas"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel

Category = Literal["News", "Event", "Announcement"]
EventType = Literal["Other", "Seminar", "Workshop", "Conference", "Celebration", "Meeting"]


class NewsEventCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: datetime
    category: Category = "News"
    location: str = ""
    start_time: str = ""
    end_time: str = ""
    event_type: EventType = "Other"
    image_url: str = ""
    facebook_embed_url: str = ""
    is_active: bool = True


class NewsEventUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    date: Optional[datetime] = None
    category: Optional[Category] = None
    location: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    event_type: Optional[EventType] = None
    image_url: Optional[str] = None
    facebook_embed_url: Optional[str] = None
    is_active: Optional[bool] = None


class NewsEventResponse(CamelModel):
    id: int
    title: str
    description: str
    date: datetime
    category: str
    location: str
    start_time: str
    end_time: str
    event_type: str
    image_url: str
    facebook_embed_url: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
