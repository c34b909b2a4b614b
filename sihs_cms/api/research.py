"""Research endpoints. Reads are public; writes need ``manage_research``."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sihs_cms.api.deps import require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.research import Research
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.schemas.research import ResearchCreate, ResearchResponse, ResearchUpdate
from sihs_cms.utils.clock import naive_utc
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/research", tags=["research"])


def _get_research(db: Session, research_id: int) -> Research:
    research = db.query(Research).filter(Research.id == research_id).first()
    if not research:
        raise NotFound("Research not found")
    return research


def _wrap(items) -> Envelope[List[ResearchResponse]]:
    return Envelope(data=[ResearchResponse.model_validate(r) for r in items])


@router.get("", response_model=Envelope[List[ResearchResponse]])
def list_research(db: Session = Depends(get_db)):
    """All research, most recently published first"""
    return _wrap(db.query(Research).order_by(Research.published_date.desc()).all())


@router.get("/published", response_model=Envelope[List[ResearchResponse]])
def list_published_research(db: Session = Depends(get_db)):
    items = (
        db.query(Research)
        .filter(Research.status == "Published")
        .order_by(Research.published_date.desc())
        .all()
    )
    return _wrap(items)


@router.get("/{research_id}", response_model=Envelope[ResearchResponse])
def get_research(research_id: int, db: Session = Depends(get_db)):
    """Fetch one entry and count the view"""
    research = _get_research(db, research_id)
    research.views = Research.views + 1
    db.commit()
    db.refresh(research)
    return Envelope(data=ResearchResponse.model_validate(research))


@router.patch("/{research_id}/download", response_model=Envelope[ResearchResponse])
def record_research_download(research_id: int, db: Session = Depends(get_db)):
    research = _get_research(db, research_id)
    research.downloads = Research.downloads + 1
    db.commit()
    db.refresh(research)
    return Envelope(data=ResearchResponse.model_validate(research))


@router.post("", response_model=Envelope[ResearchResponse], status_code=status.HTTP_201_CREATED)
def create_research(
    body: ResearchCreate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_research")),
):
    data = body.model_dump(exclude_none=True)
    if "published_date" in data:
        data["published_date"] = naive_utc(data["published_date"])
    research = Research(**data)
    db.add(research)
    db.commit()
    db.refresh(research)

    logger.info(f"Created research {research.id}", extra={"admin_id": admin.admin_id, "action": "create_research"})
    return Envelope(data=ResearchResponse.model_validate(research))


@router.put("/{research_id}", response_model=Envelope[ResearchResponse])
def update_research(
    research_id: int,
    body: ResearchUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_research")),
):
    research = _get_research(db, research_id)
    for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(research, field, naive_utc(value) if field == "published_date" else value)
    db.commit()
    db.refresh(research)

    logger.info(f"Updated research {research_id}", extra={"admin_id": admin.admin_id, "action": "update_research"})
    return Envelope(data=ResearchResponse.model_validate(research))


@router.delete("/{research_id}", response_model=MessageResponse)
def delete_research(
    research_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_research")),
):
    research = _get_research(db, research_id)
    db.delete(research)
    db.commit()

    logger.info(f"Deleted research {research_id}", extra={"admin_id": admin.admin_id, "action": "delete_research"})
    return MessageResponse(message="Research deleted successfully")
