"""Home page slider endpoints. The public list shows active slides; managing slides needs ``manage_settings``."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sihs_cms.api.deps import get_current_admin, require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.slider import Slider
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.schemas.slider import SliderCreate, SliderResponse, SliderUpdate
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/slider", tags=["slider"])


def _get_slider(db: Session, slider_id: int) -> Slider:
    slider = db.query(Slider).filter(Slider.id == slider_id).first()
    if not slider:
        raise NotFound("Slider not found")
    return slider


def _wrap(sliders) -> Envelope[List[SliderResponse]]:
    return Envelope(data=[SliderResponse.model_validate(s) for s in sliders])


@router.get("", response_model=Envelope[List[SliderResponse]])
def list_active_sliders(db: Session = Depends(get_db)):
    """Active slides in display order"""
    return _wrap(db.query(Slider).filter(Slider.is_active == True).order_by(Slider.order, Slider.id).all())


@router.get("/admin", response_model=Envelope[List[SliderResponse]])
def list_all_sliders(
    db: Session = Depends(get_db),
    _: AdminAccount = Depends(get_current_admin),
):
    """Every slide, including inactive ones, for the admin panel"""
    return _wrap(db.query(Slider).order_by(Slider.order, Slider.created_at.desc()).all())


@router.get("/{slider_id}", response_model=Envelope[SliderResponse])
def get_slider(slider_id: int, db: Session = Depends(get_db)):
    return Envelope(data=SliderResponse.model_validate(_get_slider(db, slider_id)))


@router.post("", response_model=Envelope[SliderResponse], status_code=status.HTTP_201_CREATED)
def create_slider(
    body: SliderCreate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_settings")),
):
    slider = Slider(**body.model_dump())
    db.add(slider)
    db.commit()
    db.refresh(slider)

    logger.info(f"Created slider {slider.id}", extra={"admin_id": admin.admin_id, "action": "create_slider"})
    return Envelope(message="Slider created successfully", data=SliderResponse.model_validate(slider))


@router.put("/{slider_id}", response_model=Envelope[SliderResponse])
def update_slider(
    slider_id: int,
    body: SliderUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_settings")),
):
    slider = _get_slider(db, slider_id)
    for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(slider, field, value)
    db.commit()
    db.refresh(slider)

    logger.info(f"Updated slider {slider_id}", extra={"admin_id": admin.admin_id, "action": "update_slider"})
    return Envelope(message="Slider updated successfully", data=SliderResponse.model_validate(slider))


@router.patch("/{slider_id}/toggle", response_model=Envelope[SliderResponse])
def toggle_slider(
    slider_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_settings")),
):
    slider = _get_slider(db, slider_id)
    slider.is_active = not slider.is_active
    db.commit()
    db.refresh(slider)

    state = "activated" if slider.is_active else "deactivated"
    logger.info(f"Slider {slider_id} {state}", extra={"admin_id": admin.admin_id, "action": "toggle_slider"})
    return Envelope(message=f"Slider {state} successfully", data=SliderResponse.model_validate(slider))


@router.delete("/{slider_id}", response_model=MessageResponse)
def delete_slider(
    slider_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_settings")),
):
    slider = _get_slider(db, slider_id)
    db.delete(slider)
    db.commit()

    logger.info(f"Deleted slider {slider_id}", extra={"admin_id": admin.admin_id, "action": "delete_slider"})
    return MessageResponse(message="Slider deleted successfully")
