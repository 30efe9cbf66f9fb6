"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the service layer. Every query
here is scoped to an owner id; there is no unscoped lookup by job id.
"""

from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import extract, func
from sqlalchemy.orm import Query, Session
from app.models.job import Job, JobStatus
from app.schemas.job import JobCreateRequest, JobQuery, SortOption


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _filtered(db: Session, owner_id: UUID, query: JobQuery) -> Query:
    """Build the owner-scoped, filtered (unsorted, unpaginated) job query."""
    q = db.query(Job).filter(Job.created_by == owner_id)

    if query.search:
        q = q.filter(Job.position.ilike(f"%{_escape_like(query.search)}%", escape="\\"))

    if query.status:
        q = q.filter(Job.status == query.status)

    if query.job_type:
        q = q.filter(Job.job_type == query.job_type)

    return q


_SORT_ORDERS = {
    SortOption.LATEST: (Job.created_at.desc(), Job.id.desc()),
    SortOption.OLDEST: (Job.created_at.asc(), Job.id.asc()),
    SortOption.A_Z: (Job.position.asc(), Job.id.asc()),
    SortOption.Z_A: (Job.position.desc(), Job.id.desc()),
}


def create(db: Session, owner_id: UUID, job_data: JobCreateRequest) -> Job:
    """
    Create a new job owned by owner_id.

    Args:
        db: Database session
        owner_id: Id of the authenticated user
        job_data: Validated job creation data

    Returns:
        Created Job instance with id and timestamps
    """
    db_job = Job(
        company=job_data.company,
        position=job_data.position,
        status=job_data.status,
        job_type=job_data.job_type,
        created_by=owner_id,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_for_owner(db: Session, owner_id: UUID, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID, only if it belongs to owner_id.

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id, Job.created_by == owner_id).first()


def get_multi(db: Session, owner_id: UUID, query: JobQuery) -> List[Job]:
    """
    Retrieve one page of the owner's jobs matching the query.

    Args:
        db: Database session
        owner_id: Id of the authenticated user
        query: Filters, sort order and pagination

    Returns:
        List of Job instances
    """
    return (
        _filtered(db, owner_id, query)
        .order_by(*_SORT_ORDERS[query.sort])
        .offset(query.offset)
        .limit(query.limit)
        .all()
    )


def count(db: Session, owner_id: UUID, query: JobQuery) -> int:
    """Count every job matching the query's filters, ignoring pagination."""
    return _filtered(db, owner_id, query).count()


def update_for_owner(db: Session, owner_id: UUID, job_id: int, values: Dict[str, Any]) -> Optional[Job]:
    """
    Update a job in a single statement whose WHERE clause carries both the id
    and the owner, then return the updated row.

    Args:
        db: Database session
        owner_id: Id of the authenticated user
        job_id: Job ID to update
        values: Column values to set (already validated)

    Returns:
        Updated Job instance if a row matched, None otherwise
    """
    if not values:
        return get_for_owner(db, owner_id, job_id)

    updated = (
        db.query(Job)
        .filter(Job.id == job_id, Job.created_by == owner_id)
        .update(values, synchronize_session=False)
    )
    db.commit()

    if not updated:
        return None

    return get_for_owner(db, owner_id, job_id)


def delete_for_owner(db: Session, owner_id: UUID, job_id: int) -> bool:
    """
    Delete a job by ID if it belongs to owner_id.

    Returns:
        True if deleted, False if not found
    """
    deleted = (
        db.query(Job)
        .filter(Job.id == job_id, Job.created_by == owner_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    return deleted > 0


def count_by_status(db: Session, owner_id: UUID) -> Dict[JobStatus, int]:
    """
    Count the owner's jobs grouped by status.

    Statuses without jobs are absent from the result.
    """
    rows = (
        db.query(Job.status, func.count(Job.id))
        .filter(Job.created_by == owner_id)
        .group_by(Job.status)
        .all()
    )
    return {status: total for status, total in rows}


def count_by_month(db: Session, owner_id: UUID, months: int) -> List[Tuple[int, int, int]]:
    """
    Count the owner's jobs per (year, month) of creation.

    Args:
        db: Database session
        owner_id: Id of the authenticated user
        months: Maximum number of periods to return

    Returns:
        (year, month, count) tuples for the most recent periods, newest first
    """
    year = extract("year", Job.created_at).label("year")
    month = extract("month", Job.created_at).label("month")

    rows = (
        db.query(year, month, func.count(Job.id))
        .filter(Job.created_by == owner_id)
        .group_by(year, month)
        .order_by(year.desc(), month.desc())
        .limit(months)
        .all()
    )
    return [(int(y), int(m), total) for y, m, total in rows]
