"""Department endpoints. Reads are public; writes need ``manage_departments``."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sihs_cms.api.deps import require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound, ValidationError
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.department import Department, department_path
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.schemas.department import DepartmentCreate, DepartmentResponse, DepartmentUpdate
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/departments", tags=["departments"])

_DUPLICATE = "Department with this name or code already exists"


def _get_department(db: Session, department_id: int) -> Department:
    department = db.query(Department).filter(Department.id == department_id).first()
    if not department:
        raise NotFound("Department not found")
    return department


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError(_DUPLICATE)


def _wrap(departments) -> Envelope[List[DepartmentResponse]]:
    return Envelope(data=[DepartmentResponse.model_validate(d) for d in departments])


@router.get("", response_model=Envelope[List[DepartmentResponse]])
def list_departments(db: Session = Depends(get_db)):
    """All departments, sorted by name"""
    return _wrap(db.query(Department).order_by(Department.name).all())


@router.get("/active/list", response_model=Envelope[List[DepartmentResponse]])
def list_active_departments(db: Session = Depends(get_db)):
    """Active departments only, for public display"""
    return _wrap(
        db.query(Department).filter(Department.is_active == True).order_by(Department.name).all()
    )


@router.get("/path/{path}", response_model=Envelope[DepartmentResponse])
def get_department_by_path(path: str, db: Session = Depends(get_db)):
    """Look up an active department by its URL path (with or without the leading slash)"""
    full_path = path if path.startswith("/") else f"/{path}"
    department = db.query(Department).filter(
        Department.path == full_path,
        Department.is_active == True,
    ).first()
    if not department:
        raise NotFound("Department not found")
    return Envelope(data=DepartmentResponse.model_validate(department))


@router.get("/{department_id}", response_model=Envelope[DepartmentResponse])
def get_department(department_id: int, db: Session = Depends(get_db)):
    return Envelope(data=DepartmentResponse.model_validate(_get_department(db, department_id)))


@router.post("", response_model=Envelope[DepartmentResponse], status_code=status.HTTP_201_CREATED)
def create_department(
    body: DepartmentCreate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_departments")),
):
    """Create a department; its URL path is derived from the name"""
    department = Department(**body.model_dump())
    department.name = body.name.strip()
    department.code = body.code.strip().upper()
    department.path = department_path(department.name)
    db.add(department)
    _commit(db)
    db.refresh(department)

    logger.info(f"Created department {department.code}", extra={"admin_id": admin.admin_id, "action": "create_department"})
    return Envelope(data=DepartmentResponse.model_validate(department))


@router.put("/{department_id}", response_model=Envelope[DepartmentResponse])
def update_department(
    department_id: int,
    body: DepartmentUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_departments")),
):
    department = _get_department(db, department_id)

    for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(department, field, value)
    if body.code is not None:
        department.code = body.code.strip().upper()
    if body.name is not None:
        department.name = body.name.strip()
        department.path = department_path(department.name)

    _commit(db)
    db.refresh(department)

    logger.info(f"Updated department {department.code}", extra={"admin_id": admin.admin_id, "action": "update_department"})
    return Envelope(data=DepartmentResponse.model_validate(department))


@router.delete("/{department_id}", response_model=MessageResponse)
def delete_department(
    department_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_departments")),
):
    department = _get_department(db, department_id)
    db.delete(department)
    db.commit()

    logger.info(f"Deleted department {department_id}", extra={"admin_id": admin.admin_id, "action": "delete_department"})
    return MessageResponse(message="Department deleted successfully")
