"""Notification endpoints. Reads are public; writes need ``manage_notifications``."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy import case, or_
from sqlalchemy.orm import Query, Session

from sihs_cms.api.deps import require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound, ValidationError
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.notification import AUDIENCES, PRIORITIES, Notification
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.schemas.notification import NotificationCreate, NotificationResponse, NotificationUpdate
from sihs_cms.utils.clock import naive_utc, utcnow
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def _live(db: Session) -> Query:
    """Active notifications that have not expired"""
    now = utcnow()
    return db.query(Notification).filter(
        Notification.is_active == True,
        or_(Notification.expires_at.is_(None), Notification.expires_at > now),
    )


def _get_notification(db: Session, notification_id: int) -> Notification:
    notification = db.query(Notification).filter(Notification.id == notification_id).first()
    if not notification:
        raise NotFound("Notification not found")
    return notification


def _wrap(items) -> Envelope[List[NotificationResponse]]:
    return Envelope(data=[NotificationResponse.model_validate(n) for n in items])


@router.get("", response_model=Envelope[List[NotificationResponse]])
def list_notifications(db: Session = Depends(get_db)):
    """All notifications, newest first"""
    return _wrap(db.query(Notification).order_by(Notification.date.desc()).all())


@router.get("/active", response_model=Envelope[List[NotificationResponse]])
def list_active_notifications(db: Session = Depends(get_db)):
    """Active, unexpired notifications for public display"""
    return _wrap(_live(db).order_by(Notification.date.desc()).all())


@router.get("/audience/{audience}", response_model=Envelope[List[NotificationResponse]])
def list_notifications_for_audience(audience: str, db: Session = Depends(get_db)):
    """Live notifications for ``audience`` plus those addressed to everyone, most urgent first"""
    if audience not in AUDIENCES:
        raise ValidationError("Invalid audience type")

    priority_rank = case(
        {name: rank for rank, name in enumerate(PRIORITIES)},
        value=Notification.priority,
        else_=0,
    )
    items = (
        _live(db)
        .filter(Notification.target_audience.in_(["All", audience]))
        .order_by(priority_rank.desc(), Notification.date.desc())
        .all()
    )
    return _wrap(items)


@router.get("/{notification_id}", response_model=Envelope[NotificationResponse])
def get_notification(notification_id: int, db: Session = Depends(get_db)):
    return Envelope(data=NotificationResponse.model_validate(_get_notification(db, notification_id)))


@router.post("", response_model=Envelope[NotificationResponse], status_code=status.HTTP_201_CREATED)
def create_notification(
    body: NotificationCreate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_notifications")),
):
    data = body.model_dump(exclude_none=True)
    for field in ("date", "expires_at"):
        if field in data:
            data[field] = naive_utc(data[field])
    notification = Notification(**data)
    db.add(notification)
    db.commit()
    db.refresh(notification)

    logger.info(f"Created notification {notification.id}", extra={"admin_id": admin.admin_id, "action": "create_notification"})
    return Envelope(data=NotificationResponse.model_validate(notification))


@router.put("/{notification_id}", response_model=Envelope[NotificationResponse])
def update_notification(
    notification_id: int,
    body: NotificationUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_notifications")),
):
    notification = _get_notification(db, notification_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        if field in ("date", "expires_at") and value is not None:
            value = naive_utc(value)
        elif value is None and field != "expires_at":
            continue
        setattr(notification, field, value)
    db.commit()
    db.refresh(notification)

    logger.info(f"Updated notification {notification_id}", extra={"admin_id": admin.admin_id, "action": "update_notification"})
    return Envelope(data=NotificationResponse.model_validate(notification))


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_notifications")),
):
    notification = _get_notification(db, notification_id)
    db.delete(notification)
    db.commit()

    logger.info(f"Deleted notification {notification_id}", extra={"admin_id": admin.admin_id, "action": "delete_notification"})
    return MessageResponse(message="Notification deleted successfully")
