"""Department schemas"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from sihs_cms.schemas.common import CamelModel


def _check_founded_year(value: Optional[int]) -> Optional[int]:
    if value is not None and not 1900 <= value <= datetime.now().year:
        raise ValueError(f"foundedYear must be between 1900 and {datetime.now().year}")
    return value


class DepartmentCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1, max_length=20)
    head_of_dept: str = Field(..., min_length=1, max_length=255)
    founded_year: int
    total_faculty: int = Field(..., ge=0)
    image_url: str = ""
    facilities: List[str] = Field(default_factory=list)
    research_areas: List[str] = Field(default_factory=list)
    contact_email: str = ""
    contact_phone: str = ""
    is_active: bool = True

    @field_validator("founded_year")
    @classmethod
    def check_founded_year(cls, value: Optional[int]) -> Optional[int]:
        return _check_founded_year(value)


class DepartmentUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    code: Optional[str] = Field(None, min_length=1, max_length=20)
    head_of_dept: Optional[str] = None
    founded_year: Optional[int] = None
    total_faculty: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = None
    facilities: Optional[List[str]] = None
    research_areas: Optional[List[str]] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("founded_year")
    @classmethod
    def check_founded_year(cls, value: Optional[int]) -> Optional[int]:
        return _check_founded_year(value)


class DepartmentResponse(CamelModel):
    id: int
    name: str
    code: str
    description: str
    head_of_dept: str
    founded_year: int
    total_faculty: int
    image_url: str
    path: str
    facilities: List[str]
    research_areas: List[str]
    contact_email: str
    contact_phone: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
