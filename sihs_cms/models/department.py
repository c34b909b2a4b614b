"""Department model"""
import re
from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text

from sihs_cms.database import Base


def department_path(name: str) -> str:
    """URL path for a department, e.g. "Arts & Science" -> "/department-of-arts-and-science" """
    slug = re.sub(r"\s+", "-", name.strip().lower()).replace("&", "and")
    return f"/department-of-{slug}"


class Department(Base):
    """An academic department shown on the public site"""

    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    code = Column(String(20), unique=True, nullable=False)        # upper-case
    description = Column(Text, nullable=False)
    head_of_dept = Column(String(255), nullable=False)
    founded_year = Column(Integer, nullable=False)
    total_faculty = Column(Integer, nullable=False, default=0)
    image_url = Column(String(1024), nullable=False, default="")
    path = Column(String(255), unique=True, nullable=False, index=True)
    facilities = Column(JSON, nullable=False, default=list)
    research_areas = Column(JSON, nullable=False, default=list)
    contact_email = Column(String(255), nullable=False, default="")
    contact_phone = Column(String(50), nullable=False, default="")
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
