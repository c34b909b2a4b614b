"""Download schemas"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel

Category = Literal["General", "Syllabus", "Notes", "Assignment", "Question Paper", "Form", "Guideline"]
FileType = Literal["PDF", "DOC", "DOCX", "XLS", "XLSX", "PPT", "PPTX", "ZIP", "Other"]


class DownloadCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    file_url: str = Field(..., min_length=1, max_length=1024)
    department: str = Field(..., min_length=1, max_length=255)
    file_name: str = ""
    file_size: str = ""
    category: Category = "General"
    file_type: FileType = "PDF"
    uploaded_by: str = ""
    is_active: bool = True


class DownloadUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    file_url: Optional[str] = Field(None, min_length=1, max_length=1024)
    department: Optional[str] = Field(None, min_length=1, max_length=255)
    file_name: Optional[str] = None
    file_size: Optional[str] = None
    category: Optional[Category] = None
    file_type: Optional[FileType] = None
    uploaded_by: Optional[str] = None
    is_active: Optional[bool] = None


class DownloadResponse(CamelModel):
    id: int
    title: str
    description: str
    file_url: str
    file_name: str
    file_size: str
    category: str
    department: str
    file_type: str
    download_count: int
    last_downloaded: Optional[datetime] = None
    uploaded_by: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
