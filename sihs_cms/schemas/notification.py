"""Notification schemas"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel

Category = Literal["General", "Urgent", "Academic", "Event", "Maintenance"]
Priority = Literal["Low", "Normal", "High", "Critical"]
Audience = Literal["All", "Students", "Faculty", "Staff"]


class NotificationCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    date: Optional[datetime] = None
    category: Category = "General"
    priority: Priority = "Normal"
    department: str = ""
    target_audience: Audience = "All"
    image_url: str = ""
    is_active: bool = True
    expires_at: Optional[datetime] = None


class NotificationUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    message: Optional[str] = None
    date: Optional[datetime] = None
    category: Optional[Category] = None
    priority: Optional[Priority] = None
    department: Optional[str] = None
    target_audience: Optional[Audience] = None
    image_url: Optional[str] = None
    is_active: Optional[bool] = None
    expires_at: Optional[datetime] = None


class NotificationResponse(CamelModel):
    id: int
    title: str
    message: str
    date: datetime
    category: str
    priority: str
    department: str
    target_audience: str
    image_url: str
    is_active: bool
    expires_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
