from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.schemas.job import (
    JobCreateRequest,
    JobEnvelope,
    JobListResponse,
    JobQuery,
    JobResponse,
    JobStatusFilter,
    JobTypeFilter,
    JobUpdateRequest,
    SortOption,
    StatsResponse,
)
from app.services import job_service

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def job_query_params(
    search: Optional[str] = None,
    status: Optional[JobStatusFilter] = None,
    job_type: Optional[JobTypeFilter] = Query(None, alias="jobType"),
    sort: Optional[SortOption] = None,
    location: Optional[str] = Query(None, description="Accepted for client compatibility; not used for filtering"),
    page: int = Query(1, ge=1, le=settings.MAX_PAGE),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
) -> JobQuery:
    """Parse the list query string into a JobQuery (limit is clamped to MAX_PAGE_SIZE)."""
    return JobQuery.from_params(
        search=search,
        status=status,
        job_type=job_type,
        sort=sort,
        page=page,
        limit=limit,
        max_limit=settings.MAX_PAGE_SIZE,
    )


@router.get("/", response_model=JobListResponse)
def list_jobs(
    query: JobQuery = Depends(job_query_params),
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    List the caller's jobs with filtering, sorting and pagination.

    Args:
        search: Case-insensitive substring of the position
        status: pending, interview, declined or all
        jobType: full-time, part-time, remote, internship, contract or all
        sort: latest (default), oldest, a-z or z-a
        page: Page number, starting at 1
        limit: Page size (default: 10, max: 100)
    """
    return job_service.list_jobs(db, user_id, query)


@router.post("/", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Create a job application owned by the caller.

    Any owner field in the body is ignored; createdBy is always the caller.
    """
    job = job_service.create_job(db, user_id, request)
    return {"job": JobResponse.model_validate(job)}


@router.get("/stats", response_model=StatsResponse)
def show_stats(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Application counts per status and per month (last 6 active months, oldest first).
    """
    return job_service.show_stats(db, user_id)


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(
    job_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Retrieve one of the caller's jobs by ID.
    """
    job = job_service.get_job(db, user_id, job_id)
    return {"job": JobResponse.model_validate(job)}


@router.patch("/{job_id}", response_model=JobEnvelope)
@router.put("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Partially update one of the caller's jobs.

    Returns 400 if company or position is sent as an empty string and 404 if
    the job does not exist or belongs to another user.
    """
    job = job_service.update_job(db, user_id, job_id, request)
    return {"job": JobResponse.model_validate(job)}


@router.delete("/{job_id}", status_code=200)
def delete_job(
    job_id: int,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Delete one of the caller's jobs. Responds 200 with an empty body.
    """
    job_service.delete_job(db, user_id, job_id)
    return Response(status_code=status.HTTP_200_OK)
