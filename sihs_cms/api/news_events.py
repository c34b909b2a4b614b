"""News/event endpoints. Reads are public; writes need ``manage_news``."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sihs_cms.api.deps import require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.news_event import NewsEvent
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.schemas.news_event import NewsEventCreate, NewsEventResponse, NewsEventUpdate
from sihs_cms.utils.clock import naive_utc
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/news-events", tags=["news-events"])


def _get_news_event(db: Session, news_event_id: int) -> NewsEvent:
    news_event = db.query(NewsEvent).filter(NewsEvent.id == news_event_id).first()
    if not news_event:
        raise NotFound("News/Event not found")
    return news_event


@router.get("", response_model=Envelope[List[NewsEventResponse]])
def list_news_events(db: Session = Depends(get_db)):
    """All news/events, newest first"""
    items = db.query(NewsEvent).order_by(NewsEvent.date.desc()).all()
    return Envelope(data=[NewsEventResponse.model_validate(n) for n in items])


@router.get("/active/list", response_model=Envelope[List[NewsEventResponse]])
def list_active_news_events(db: Session = Depends(get_db)):
    items = (
        db.query(NewsEvent)
        .filter(NewsEvent.is_active == True)
        .order_by(NewsEvent.date.desc())
        .all()
    )
    return Envelope(data=[NewsEventResponse.model_validate(n) for n in items])


@router.get("/{news_event_id}", response_model=Envelope[NewsEventResponse])
def get_news_event(news_event_id: int, db: Session = Depends(get_db)):
    return Envelope(data=NewsEventResponse.model_validate(_get_news_event(db, news_event_id)))


@router.post("", response_model=Envelope[NewsEventResponse], status_code=status.HTTP_201_CREATED)
def create_news_event(
    body: NewsEventCreate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_news")),
):
    news_event = NewsEvent(**body.model_dump())
    news_event.date = naive_utc(body.date)
    db.add(news_event)
    db.commit()
    db.refresh(news_event)

    logger.info(f"Created news/event {news_event.id}", extra={"admin_id": admin.admin_id, "action": "create_news_event"})
    return Envelope(data=NewsEventResponse.model_validate(news_event))


@router.put("/{news_event_id}", response_model=Envelope[NewsEventResponse])
def update_news_event(
    news_event_id: int,
    body: NewsEventUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_news")),
):
    news_event = _get_news_event(db, news_event_id)
    for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(news_event, field, naive_utc(value) if field == "date" else value)
    db.commit()
    db.refresh(news_event)

    logger.info(f"Updated news/event {news_event_id}", extra={"admin_id": admin.admin_id, "action": "update_news_event"})
    return Envelope(data=NewsEventResponse.model_validate(news_event))


@router.delete("/{news_event_id}", response_model=MessageResponse)
def delete_news_event(
    news_event_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_news")),
):
    news_event = _get_news_event(db, news_event_id)
    db.delete(news_event)
    db.commit()

    logger.info(f"Deleted news/event {news_event_id}", extra={"admin_id": admin.admin_id, "action": "delete_news_event"})
    return MessageResponse(message="News/Event deleted successfully")
