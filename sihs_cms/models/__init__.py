"""Database models"""
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.department import Department
from sihs_cms.models.download import Download
from sihs_cms.models.faculty import Faculty
from sihs_cms.models.news_event import NewsEvent
from sihs_cms.models.notification import Notification
from sihs_cms.models.research import Research
from sihs_cms.models.site_settings import SiteSettings
from sihs_cms.models.slider import Slider

__all__ = [
    "AdminAccount",
    "Department",
    "Download",
    "Faculty",
    "NewsEvent",
    "Notification",
    "Research",
    "SiteSettings",
    "Slider",
]
