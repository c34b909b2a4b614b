"""Faculty schemas"""
from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel

Designation = Literal[
    "Professor",
    "Associate Professor",
    "Assistant Professor",
    "Lecturer",
    "Instructor",
    "Visiting Faculty",
    "Head of Department",
    "Dean",
    "Vice Chancellor",
    "Research Scholar",
]


class Publication(CamelModel):
    title: str
    journal: Optional[str] = None
    year: Optional[int] = None
    link: Optional[str] = None


class FacultyCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    department_id: int
    designation: Designation
    email: str = Field(..., min_length=3, max_length=255)
    phone: str = Field("", pattern=r"^(\+?[\d\s\-()]{10,})?$")
    image_url: str = ""
    education: str = Field("", max_length=200)
    specialization: str = Field("", max_length=150)
    bio: str = Field("", max_length=1000)
    research_interest: str = Field("", max_length=300)
    experience: str = ""
    publications: List[Publication] = Field(default_factory=list)
    social_links: Dict[str, str] = Field(default_factory=dict)
    office_location: str = ""
    office_hours: str = ""
    joining_date: Optional[datetime] = None
    is_active: bool = True


class FacultyUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    department_id: Optional[int] = None
    designation: Optional[Designation] = None
    email: Optional[str] = Field(None, min_length=3, max_length=255)
    phone: Optional[str] = Field(None, pattern=r"^(\+?[\d\s\-()]{10,})?$")
    image_url: Optional[str] = None
    education: Optional[str] = Field(None, max_length=200)
    specialization: Optional[str] = Field(None, max_length=150)
    bio: Optional[str] = Field(None, max_length=1000)
    research_interest: Optional[str] = Field(None, max_length=300)
    experience: Optional[str] = None
    publications: Optional[List[Publication]] = None
    social_links: Optional[Dict[str, str]] = None
    office_location: Optional[str] = None
    office_hours: Optional[str] = None
    joining_date: Optional[datetime] = None
    is_active: Optional[bool] = None


class DepartmentRef(CamelModel):
    id: int
    name: str
    code: str


class FacultyResponse(CamelModel):
    id: int
    name: str
    department_id: int
    department: Optional[DepartmentRef] = None
    designation: str
    email: str
    phone: str
    image_url: str
    education: str
    specialization: str
    bio: str
    research_interest: str
    experience: str
    publications: List[Publication]
    social_links: Dict[str, str]
    office_location: str
    office_hours: str
    joining_date: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime


class FacultyPage(CamelModel):
    items: List[FacultyResponse]
    total: int
    page: int
    pages: int


class DesignationCount(CamelModel):
    designation: str
    count: int


class DepartmentCount(CamelModel):
    department_id: int
    department_name: str
    faculty_count: int


class FacultyStats(CamelModel):
    total_faculty: int
    active_faculty: int
    inactive_faculty: int
    designation_stats: List[DesignationCount]
    department_stats: List[DepartmentCount]
