"""Download model"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from sihs_cms.database import Base

DOWNLOAD_CATEGORIES = ("General", "Syllabus", "Notes", "Assignment", "Question Paper", "Form", "Guideline")
FILE_TYPES = ("PDF", "DOC", "DOCX", "XLS", "XLSX", "PPT", "PPTX", "ZIP", "Other")

# Downloads filed under this department code are listed for every department
GENERAL_DEPARTMENT = "GEN"


class Download(Base):
    """A downloadable file (syllabus, form, notes...) published on the site"""

    __tablename__ = "downloads"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    file_url = Column(String(1024), nullable=False)
    file_name = Column(String(255), nullable=False, default="")
    file_size = Column(String(50), nullable=False, default="")
    category = Column(String(30), nullable=False, default="General", index=True)
    department = Column(String(255), nullable=False, index=True)
    file_type = Column(String(10), nullable=False, default="PDF")
    download_count = Column(Integer, nullable=False, default=0, index=True)
    last_downloaded = Column(DateTime, nullable=True)
    uploaded_by = Column(String(255), nullable=False, default="")
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
