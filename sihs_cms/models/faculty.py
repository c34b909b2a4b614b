"""Faculty model"""
from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from sihs_cms.database import Base

DESIGNATIONS = (
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
)

SENIOR_DESIGNATIONS = ("Professor", "Associate Professor", "Head of Department", "Dean")


class Faculty(Base):
    """A teaching or research staff member attached to one department"""

    __tablename__ = "faculty"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    department_id = Column(Integer, ForeignKey("departments.id", ondelete="CASCADE"), nullable=False, index=True)
    designation = Column(String(50), nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)   # always lower-case
    phone = Column(String(50), nullable=False, default="")
    image_url = Column(String(1024), nullable=False, default="")
    education = Column(String(200), nullable=False, default="")
    specialization = Column(String(150), nullable=False, default="")
    bio = Column(Text, nullable=False, default="")
    research_interest = Column(String(300), nullable=False, default="")
    experience = Column(String(255), nullable=False, default="")
    publications = Column(JSON, nullable=False, default=list)    # [{title, journal, year, link}]
    social_links = Column(JSON, nullable=False, default=dict)    # {linkedin, googleScholar, researchGate, website}
    office_location = Column(String(255), nullable=False, default="")
    office_hours = Column(String(255), nullable=False, default="")
    joining_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def is_senior(self) -> bool:
        return self.designation in SENIOR_DESIGNATIONS
