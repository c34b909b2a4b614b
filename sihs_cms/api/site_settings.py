"""Site settings endpoints. A single settings row exists; it is created with defaults on first read."""
import copy

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sihs_cms.api.deps import require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.site_settings import DEFAULT_SITE_SETTINGS, SiteSettings
from sihs_cms.schemas.common import Envelope
from sihs_cms.schemas.site_settings import SiteSettingsPatch, SiteSettingsResponse, SiteSettingsSave
from sihs_cms.utils.auth import validate_email
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/site-settings", tags=["site-settings"])

_NESTED = ("map_location", "social_links", "opening_hours")


def get_or_create_settings(db: Session) -> SiteSettings:
    """Return the settings row, creating it from the defaults if missing"""
    settings = db.query(SiteSettings).order_by(SiteSettings.id).first()
    if settings is None:
        settings = SiteSettings(**copy.deepcopy(DEFAULT_SITE_SETTINGS))
        db.add(settings)
        db.commit()
        db.refresh(settings)
    return settings


def _apply(settings: SiteSettings, body: SiteSettingsPatch) -> None:
    """Copy supplied fields onto ``settings``; nested groups are merged rather than replaced"""
    fields = body.model_dump(exclude_none=True, exclude=set(_NESTED))
    if "email" in fields:
        fields["email"] = validate_email(fields["email"])
    for field, value in fields.items():
        setattr(settings, field, value)

    for field in _NESTED:
        group = getattr(body, field)
        if group is None:
            continue
        merged = dict(getattr(settings, field) or {})
        merged.update(group.model_dump(by_alias=True, exclude_none=True))
        setattr(settings, field, merged)


@router.get("", response_model=Envelope[SiteSettingsResponse])
def get_site_settings(db: Session = Depends(get_db)):
    return Envelope(data=SiteSettingsResponse.model_validate(get_or_create_settings(db)))


@router.post("", response_model=Envelope[SiteSettingsResponse])
def save_site_settings(
    body: SiteSettingsSave,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_settings")),
):
    """Save the settings form. School name, address and email are required."""
    settings = get_or_create_settings(db)
    _apply(settings, body)
    db.commit()
    db.refresh(settings)

    logger.info("Site settings saved", extra={"admin_id": admin.admin_id, "action": "save_site_settings"})
    return Envelope(message="Site settings updated successfully", data=SiteSettingsResponse.model_validate(settings))


@router.delete("/reset", response_model=Envelope[SiteSettingsResponse])
def reset_site_settings(
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_settings")),
):
    """Discard the stored settings and recreate the defaults"""
    db.query(SiteSettings).delete()
    db.commit()
    settings = get_or_create_settings(db)

    logger.info("Site settings reset", extra={"admin_id": admin.admin_id, "action": "reset_site_settings"})
    return Envelope(message="Settings reset to defaults", data=SiteSettingsResponse.model_validate(settings))


@router.put("/{settings_id}", response_model=Envelope[SiteSettingsResponse])
def update_site_settings(
    settings_id: int,
    body: SiteSettingsPatch,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_settings")),
):
    """Update selected fields of the settings row"""
    settings = db.query(SiteSettings).filter(SiteSettings.id == settings_id).first()
    if not settings:
        raise NotFound("Settings not found")
    _apply(settings, body)
    db.commit()
    db.refresh(settings)

    logger.info("Site settings updated", extra={"admin_id": admin.admin_id, "action": "update_site_settings"})
    return Envelope(message="Settings updated successfully", data=SiteSettingsResponse.model_validate(settings))
