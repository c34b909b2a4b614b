"""Faculty endpoints. Reads are public; writes need ``manage_faculty``."""
import math
from typing import Dict, Iterable, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sihs_cms.api.deps import require_permission
from sihs_cms.database import get_db
from sihs_cms.errors import NotFound, ValidationError
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.models.department import Department
from sihs_cms.models.faculty import Faculty
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.schemas.faculty import (
    DepartmentCount,
    DepartmentRef,
    DesignationCount,
    FacultyCreate,
    FacultyPage,
    FacultyResponse,
    FacultyStats,
    FacultyUpdate,
)
from sihs_cms.utils.auth import validate_email
from sihs_cms.utils.clock import naive_utc
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/faculty", tags=["faculty"])

_DUPLICATE = "Faculty member with this email already exists"


def _get_faculty(db: Session, faculty_id: int) -> Faculty:
    faculty = db.query(Faculty).filter(Faculty.id == faculty_id).first()
    if not faculty:
        raise NotFound("Faculty member not found")
    return faculty


def _require_department(db: Session, department_id: int) -> None:
    if not db.query(Department.id).filter(Department.id == department_id).first():
        raise ValidationError("Department not found")


def _unique_email(db: Session, email: str, exclude_id: Optional[int] = None) -> str:
    normalized = validate_email(email)
    query = db.query(Faculty.id).filter(Faculty.email == normalized)
    if exclude_id is not None:
        query = query.filter(Faculty.id != exclude_id)
    if query.first():
        raise ValidationError(_DUPLICATE)
    return normalized


def _responses(db: Session, members: Iterable[Faculty]) -> List[FacultyResponse]:
    """Serialize faculty with their department's name and code attached"""
    members = list(members)
    department_ids = {m.department_id for m in members}
    departments: Dict[int, Department] = {}
    if department_ids:
        departments = {
            d.id: d for d in db.query(Department).filter(Department.id.in_(department_ids)).all()
        }

    responses = []
    for member in members:
        response = FacultyResponse.model_validate(member)
        department = departments.get(member.department_id)
        if department is not None:
            response.department = DepartmentRef.model_validate(department)
        responses.append(response)
    return responses


def _one(db: Session, faculty: Faculty) -> FacultyResponse:
    return _responses(db, [faculty])[0]


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError(_DUPLICATE)


@router.get("", response_model=Envelope[FacultyPage])
def list_faculty(
    department: Optional[int] = Query(None, description="Filter by department id"),
    designation: Optional[str] = Query(None, description="Filter by designation"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    search: Optional[str] = Query(None, description="Match name, email, specialization or research interest"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """
    List faculty members, ordered by designation then name.

    Results are paginated; ``pages`` is the number of pages at the given ``limit``.
    """
    query = db.query(Faculty)
    if department is not None:
        query = query.filter(Faculty.department_id == department)
    if designation:
        query = query.filter(Faculty.designation == designation)
    if is_active is not None:
        query = query.filter(Faculty.is_active == is_active)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Faculty.name.ilike(pattern),
                Faculty.email.ilike(pattern),
                Faculty.specialization.ilike(pattern),
                Faculty.research_interest.ilike(pattern),
            )
        )

    total = query.count()
    members = (
        query.order_by(Faculty.designation, Faculty.name)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return Envelope(
        data=FacultyPage(
            items=_responses(db, members),
            total=total,
            page=page,
            pages=math.ceil(total / limit),
        )
    )


@router.get("/stats/summary", response_model=Envelope[FacultyStats])
def faculty_stats(db: Session = Depends(get_db)):
    """Headcounts overall, per designation, and active members per department"""
    total = db.query(Faculty).count()
    active = db.query(Faculty).filter(Faculty.is_active == True).count()

    designation_rows = (
        db.query(Faculty.designation, func.count(Faculty.id).label("count"))
        .group_by(Faculty.designation)
        .order_by(func.count(Faculty.id).desc(), Faculty.designation)
        .all()
    )
    department_rows = (
        db.query(Department.id, Department.name, func.count(Faculty.id).label("count"))
        .join(Faculty, Faculty.department_id == Department.id)
        .filter(Faculty.is_active == True)
        .group_by(Department.id, Department.name)
        .order_by(func.count(Faculty.id).desc(), Department.name)
        .all()
    )

    return Envelope(
        data=FacultyStats(
            total_faculty=total,
            active_faculty=active,
            inactive_faculty=total - active,
            designation_stats=[DesignationCount(designation=d, count=c) for d, c in designation_rows],
            department_stats=[
                DepartmentCount(department_id=i, department_name=n, faculty_count=c)
                for i, n, c in department_rows
            ],
        )
    )


@router.get("/department/{department_id}", response_model=Envelope[List[FacultyResponse]])
def list_faculty_by_department(department_id: int, db: Session = Depends(get_db)):
    """Active members of one department"""
    members = (
        db.query(Faculty)
        .filter(Faculty.department_id == department_id, Faculty.is_active == True)
        .order_by(Faculty.designation, Faculty.name)
        .all()
    )
    return Envelope(data=_responses(db, members))


@router.get("/{faculty_id}", response_model=Envelope[FacultyResponse])
def get_faculty(faculty_id: int, db: Session = Depends(get_db)):
    return Envelope(data=_one(db, _get_faculty(db, faculty_id)))


@router.post("", response_model=Envelope[FacultyResponse], status_code=status.HTTP_201_CREATED)
def create_faculty(
    body: FacultyCreate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_faculty")),
):
    _require_department(db, body.department_id)
    data = body.model_dump(exclude_none=True)
    data["name"] = body.name.strip()
    data["email"] = _unique_email(db, body.email)
    if "joining_date" in data:
        data["joining_date"] = naive_utc(data["joining_date"])

    faculty = Faculty(**data)
    db.add(faculty)
    _commit(db)
    db.refresh(faculty)

    logger.info(f"Created faculty member {faculty.id}", extra={"admin_id": admin.admin_id, "action": "create_faculty"})
    return Envelope(message="Faculty member created successfully", data=_one(db, faculty))


@router.put("/{faculty_id}", response_model=Envelope[FacultyResponse])
def update_faculty(
    faculty_id: int,
    body: FacultyUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_faculty")),
):
    faculty = _get_faculty(db, faculty_id)
    updates = body.model_dump(exclude_unset=True, exclude_none=True)

    if "department_id" in updates:
        _require_department(db, updates["department_id"])
    if "email" in updates:
        updates["email"] = _unique_email(db, updates["email"], exclude_id=faculty.id)
    if "name" in updates:
        updates["name"] = updates["name"].strip()
    if "joining_date" in updates:
        updates["joining_date"] = naive_utc(updates["joining_date"])

    for field, value in updates.items():
        setattr(faculty, field, value)
    _commit(db)
    db.refresh(faculty)

    logger.info(f"Updated faculty member {faculty_id}", extra={"admin_id": admin.admin_id, "action": "update_faculty"})
    return Envelope(message="Faculty member updated successfully", data=_one(db, faculty))


@router.delete("/{faculty_id}", response_model=MessageResponse)
def delete_faculty(
    faculty_id: int,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(require_permission("manage_faculty")),
):
    faculty = _get_faculty(db, faculty_id)
    db.delete(faculty)
    db.commit()

    logger.info(f"Deleted faculty member {faculty_id}", extra={"admin_id": admin.admin_id, "action": "delete_faculty"})
    return MessageResponse(message="Faculty member deleted successfully")
