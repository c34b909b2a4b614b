"""Slider schemas"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel


class SliderCreate(CamelModel):
    image_url: str = Field(..., min_length=1, max_length=1024)
    title: str = ""
    description: str = ""
    button_text: str = "Learn More"
    button_link: str = "/"
    order: int = 0
    is_active: bool = True
    auto_play: bool = True
    auto_play_interval: int = Field(5000, gt=0)


class SliderUpdate(CamelModel):
    image_url: Optional[str] = Field(None, min_length=1, max_length=1024)
    title: Optional[str] = None
    description: Optional[str] = None
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None
    auto_play: Optional[bool] = None
    auto_play_interval: Optional[int] = Field(None, gt=0)


class SliderResponse(CamelModel):
    id: int
    title: str
    description: str
    image_url: str
    button_text: str
    button_link: str
    order: int
    is_active: bool
    auto_play: bool
    auto_play_interval: int
    created_at: datetime
    updated_at: datetime
