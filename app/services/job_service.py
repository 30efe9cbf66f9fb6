"""
Job application handlers.

Each function is one unit of work for one authenticated caller: it takes the
database session and the caller's user id explicitly, runs the owner-scoped
store operation and turns "nothing matched" into NotFoundError.
"""

import logging
import math
from uuid import UUID
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import BadRequestError, NotFoundError
from app.crud import job as job_crud
from app.models.job import Job, JobStatus
from app.schemas.job import (
    DefaultStats,
    JobCreateRequest,
    JobListResponse,
    JobQuery,
    JobResponse,
    JobUpdateRequest,
    MonthlyApplications,
    StatsResponse,
)
from app.services.calendar import format_month

logger = logging.getLogger(__name__)


def _not_found(job_id: int) -> NotFoundError:
    return NotFoundError(f"No job with id {job_id}")


def list_jobs(db: Session, user_id: UUID, query: JobQuery) -> JobListResponse:
    """
    List one page of the caller's jobs.

    totalJobs counts every match of the filters regardless of page/limit,
    numOfPages is ceil(totalJobs / limit).
    """
    jobs = job_crud.get_multi(db, user_id, query)
    total_jobs = job_crud.count(db, user_id, query)
    num_of_pages = math.ceil(total_jobs / query.limit)

    return JobListResponse(
        jobs=[JobResponse.model_validate(job) for job in jobs],
        count=len(jobs),
        total_jobs=total_jobs,
        num_of_pages=num_of_pages,
    )


def get_job(db: Session, user_id: UUID, job_id: int) -> Job:
    job = job_crud.get_for_owner(db, user_id, job_id)
    if not job:
        raise _not_found(job_id)
    return job


def create_job(db: Session, user_id: UUID, payload: JobCreateRequest) -> Job:
    """Create a job owned by the caller; the payload never decides the owner."""
    job = job_crud.create(db, user_id, payload)
    logger.info(f"Created job {job.id} ({job.position} at {job.company}) for user {user_id}")
    return job


def update_job(db: Session, user_id: UUID, job_id: int, payload: JobUpdateRequest) -> Job:
    """
    Apply a partial update to one of the caller's jobs.

    Raises:
        BadRequestError: company or position sent as an empty string
        NotFoundError: no job with this id owned by the caller
    """
    values = payload.model_dump(exclude_unset=True)

    if values.get("company") == "" or values.get("position") == "":
        logger.warning(f"Rejected update of job {job_id}: empty company or position")
        raise BadRequestError("Company or Position fields cannot be empty")

    # Explicit nulls would violate NOT NULL columns; treat them as "not sent"
    values = {field: value for field, value in values.items() if value is not None}

    job = job_crud.update_for_owner(db, user_id, job_id, values)
    if not job:
        logger.warning(f"Update of job {job_id} by user {user_id}: not found")
        raise _not_found(job_id)

    logger.info(f"Updated job {job_id}: {sorted(values)}")
    return job


def delete_job(db: Session, user_id: UUID, job_id: int) -> None:
    if not job_crud.delete_for_owner(db, user_id, job_id):
        logger.warning(f"Delete of job {job_id} by user {user_id}: not found")
        raise _not_found(job_id)

    logger.info(f"Deleted job {job_id}")


def show_stats(db: Session, user_id: UUID) -> StatsResponse:
    """
    Aggregate the caller's jobs.

    Returns:
        defaultStats: count per status, 0 for statuses without jobs
        monthlyApplications: jobs per month for the most recent
            STATS_MONTHS months that have any, oldest first
    """
    by_status = job_crud.count_by_status(db, user_id)
    default_stats = DefaultStats(
        pending=by_status.get(JobStatus.PENDING, 0),
        interview=by_status.get(JobStatus.INTERVIEW, 0),
        declined=by_status.get(JobStatus.DECLINED, 0),
    )

    by_month = job_crud.count_by_month(db, user_id, settings.STATS_MONTHS)
    monthly_applications = [
        MonthlyApplications(date=format_month(year, month), count=total)
        for year, month, total in reversed(by_month)
    ]

    return StatsResponse(
        default_stats=default_stats,
        monthly_applications=monthly_applications,
    )
