"""Download endpoints. Reads and the download counter are public; writes need ``manage_downloads``."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sihs_cms.api.deps import require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.download import GENERAL_DEPARTMENT, Download
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.schemas.download import DownloadCreate, DownloadResponse, DownloadUpdate
from sihs_cms.utils.clock import utcnow
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/downloads", tags=["downloads"])

POPULAR_LIMIT = 10


def _get_download(db: Session, download_id: int) -> Download:
    download = db.query(Download).filter(Download.id == download_id).first()
    if not download:
        raise NotFound("Download not found")
    return download


def _wrap(downloads) -> Envelope[List[DownloadResponse]]:
    return Envelope(data=[DownloadResponse.model_validate(d) for d in downloads])


def _active(db: Session):
    return db.query(Download).filter(Download.is_active == True)


@router.get("", response_model=Envelope[List[DownloadResponse]])
def list_downloads(db: Session = Depends(get_db)):
    """Every download, newest first"""
    return _wrap(db.query(Download).order_by(Download.created_at.desc(), Download.id.desc()).all())


@router.get("/active", response_model=Envelope[List[DownloadResponse]])
def list_active_downloads(db: Session = Depends(get_db)):
    return _wrap(_active(db).order_by(Download.created_at.desc(), Download.id.desc()).all())


@router.get("/popular", response_model=Envelope[List[DownloadResponse]])
def list_popular_downloads(db: Session = Depends(get_db)):
    """The ten most downloaded active files"""
    return _wrap(_active(db).order_by(Download.download_count.desc(), Download.id).limit(POPULAR_LIMIT).all())


@router.get("/department/{department}", response_model=Envelope[List[DownloadResponse]])
def list_department_downloads(department: str, db: Session = Depends(get_db)):
    """Active downloads for ``department`` plus the general ones shared by all departments"""
    downloads = (
        _active(db)
        .filter(Download.department.in_([GENERAL_DEPARTMENT, department]))
        .order_by(Download.category, Download.title)
        .all()
    )
    return _wrap(downloads)


@router.get("/category/{category}", response_model=Envelope[List[DownloadResponse]])
def list_category_downloads(category: str, db: Session = Depends(get_db)):
    return _wrap(_active(db).filter(Download.category == category).order_by(Download.title).all())


@router.get("/{download_id}", response_model=Envelope[DownloadResponse])
def get_download(download_id: int, db: Session = Depends(get_db)):
    return Envelope(data=DownloadResponse.model_validate(_get_download(db, download_id)))


@router.post("", response_model=Envelope[DownloadResponse], status_code=status.HTTP_201_CREATED)
def create_download(
    body: DownloadCreate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_downloads")),
):
    download = Download(**body.model_dump())
    db.add(download)
    db.commit()
    db.refresh(download)

    logger.info(f"Created download {download.id}", extra={"admin_id": admin.admin_id, "action": "create_download"})
    return Envelope(data=DownloadResponse.model_validate(download))


@router.put("/{download_id}", response_model=Envelope[DownloadResponse])
def update_download(
    download_id: int,
    body: DownloadUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_downloads")),
):
    download = _get_download(db, download_id)
    for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(download, field, value)
    db.commit()
    db.refresh(download)

    logger.info(f"Updated download {download_id}", extra={"admin_id": admin.admin_id, "action": "update_download"})
    return Envelope(data=DownloadResponse.model_validate(download))


@router.patch("/{download_id}/download", response_model=Envelope[DownloadResponse])
def record_download(download_id: int, db: Session = Depends(get_db)):
    """Count one download of the file"""
    download = _get_download(db, download_id)
    download.download_count = Download.download_count + 1
    download.last_downloaded = utcnow()
    db.commit()
    db.refresh(download)
    return Envelope(message="Download count updated successfully", data=DownloadResponse.model_validate(download))


@router.patch("/{download_id}/toggle", response_model=Envelope[DownloadResponse])
def toggle_download(
    download_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_downloads")),
):
    download = _get_download(db, download_id)
    download.is_active = not download.is_active
    db.commit()
    db.refresh(download)

    state = "activated" if download.is_active else "deactivated"
    logger.info(f"Download {download_id} {state}", extra={"admin_id": admin.admin_id, "action": "toggle_download"})
    return Envelope(message=f"Download {state} successfully", data=DownloadResponse.model_validate(download))


@router.delete("/{download_id}", response_model=MessageResponse)
def delete_download(
    download_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_downloads")),
):
    download = _get_download(db, download_id)
    db.delete(download)
    db.commit()

    logger.info(f"Deleted download {download_id}", extra={"admin_id": admin.admin_id, "action": "delete_download"})
    return MessageResponse(message="Download deleted successfully")
