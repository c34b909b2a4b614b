"""Pydantic schemas for request/response validation"""
from sihs_cms.schemas.admin_account import AdminAccountCreate, AdminAccountResponse, AdminAccountUpdate
from sihs_cms.schemas.auth import (
    AuthPayload,
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
)
from sihs_cms.schemas.common import CamelModel, Envelope, MessageResponse
from sihs_cms.schemas.department import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from sihs_cms.schemas.download import DownloadCreate, DownloadResponse, DownloadUpdate
from sihs_cms.schemas.faculty import FacultyCreate, FacultyPage, FacultyResponse, FacultyStats, FacultyUpdate
from sihs_cms.schemas.news_event import NewsEventCreate, NewsEventResponse, NewsEventUpdate
from sihs_cms.schemas.notification import NotificationCreate, NotificationResponse, NotificationUpdate
from sihs_cms.schemas.research import ResearchCreate, ResearchResponse, ResearchUpdate
from sihs_cms.schemas.site_settings import SiteSettingsPatch, SiteSettingsResponse, SiteSettingsSave
from sihs_cms.schemas.slider import SliderCreate, SliderResponse, SliderUpdate

__all__ = [
    "AdminAccountCreate",
    "AdminAccountResponse",
    "AdminAccountUpdate",
    "AuthPayload",
    "CamelModel",
    "ChangePasswordRequest",
    "DepartmentCreate",
    "DepartmentResponse",
    "DepartmentUpdate",
    "DownloadCreate",
    "DownloadResponse",
    "DownloadUpdate",
    "Envelope",
    "FacultyCreate",
    "FacultyPage",
    "FacultyResponse",
    "FacultyStats",
    "FacultyUpdate",
    "LoginRequest",
    "MessageResponse",
    "NewsEventCreate",
    "NewsEventResponse",
    "NewsEventUpdate",
    "NotificationCreate",
    "NotificationResponse",
    "NotificationUpdate",
    "ProfileUpdate",
    "RegisterRequest",
    "ResearchCreate",
    "ResearchResponse",
    "ResearchUpdate",
    "SiteSettingsPatch",
    "SiteSettingsResponse",
    "SiteSettingsSave",
    "SliderCreate",
    "SliderResponse",
    "SliderUpdate",
]
