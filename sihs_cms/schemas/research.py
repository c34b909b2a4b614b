"""Research schemas"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel

Status = Literal["Draft", "Published", "Under Review"]


class ResearchCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    authors: List[str] = Field(default_factory=list)
    status: Status = "Draft"
    file_url: str = ""
    published_date: Optional[datetime] = None


class ResearchUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    authors: Optional[List[str]] = None
    status: Optional[Status] = None
    file_url: Optional[str] = None
    published_date: Optional[datetime] = None


class ResearchResponse(CamelModel):
    id: int
    title: str
    description: str
    authors: List[str]
    status: str
    file_url: str
    published_date: datetime
    views: int
    downloads: int
    created_at: datetime
    updated_at: datetime
