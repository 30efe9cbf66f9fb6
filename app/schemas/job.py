from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
from enum import Enum
from uuid import UUID

from app.core.config import settings
from app.models.job import JobStatus, JobType


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys (jobType, createdAt, ...)"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class JobStatusFilter(str, Enum):
    """Status values accepted by the list endpoint, including the "all" sentinel"""
    ALL = "all"
    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"


class JobTypeFilter(str, Enum):
    """Job type values accepted by the list endpoint, including the "all" sentinel"""
    ALL = "all"
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    INTERNSHIP = "internship"
    CONTRACT = "contract"


class SortOption(str, Enum):
    """Sort orders for the job list"""
    LATEST = "latest"
    OLDEST = "oldest"
    A_Z = "a-z"
    Z_A = "z-a"


class JobQuery(BaseModel):
    """
    Filter, sort and pagination descriptor for listing a user's jobs.

    Built from already-validated query parameters by `from_params`, which
    resolves the "all" sentinels to no filter and clamps the page size.
    """
    search: Optional[str] = None
    status: Optional[JobStatus] = None
    job_type: Optional[JobType] = None
    sort: SortOption = SortOption.LATEST
    page: int = Field(1, ge=1, le=settings.MAX_PAGE)
    limit: int = Field(10, ge=1, le=settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_params(
        cls,
        search: Optional[str] = None,
        status: Optional[JobStatusFilter] = None,
        job_type: Optional[JobTypeFilter] = None,
        sort: Optional[SortOption] = None,
        page: int = 1,
        limit: int = 10,
        max_limit: Optional[int] = None,
    ) -> "JobQuery":
        if max_limit is not None and limit > max_limit:
            limit = max_limit

        return cls(
            search=search or None,
            status=JobStatus(status.value) if status and status != JobStatusFilter.ALL else None,
            job_type=JobType(job_type.value) if job_type and job_type != JobTypeFilter.ALL else None,
            sort=sort or SortOption.LATEST,
            page=page,
            limit=limit,
        )


class JobCreateRequest(CamelModel):
    """Schema for creating a new job application. The owner always comes from the token."""
    company: str = Field(..., min_length=1, max_length=50)
    position: str = Field(..., min_length=1, max_length=100)
    status: JobStatus = JobStatus.PENDING
    job_type: JobType = JobType.FULL_TIME


class JobUpdateRequest(CamelModel):
    """
    Schema for partially updating a job.

    Empty company/position strings are let through here on purpose so the
    service can answer them with its own 400 message.
    """
    company: Optional[str] = Field(None, max_length=50)
    position: Optional[str] = Field(None, max_length=100)
    status: Optional[JobStatus] = None
    job_type: Optional[JobType] = None


class JobResponse(CamelModel):
    """Schema for job response"""
    id: int
    company: str
    position: str
    status: JobStatus
    job_type: JobType
    created_by: UUID
    created_at: datetime
    updated_at: Optional[datetime] = None


class JobEnvelope(CamelModel):
    """Single job wrapped as {"job": {...}}"""
    job: JobResponse


class JobListResponse(CamelModel):
    """One page of jobs plus totals for the whole filter"""
    jobs: List[JobResponse]
    count: int
    total_jobs: int
    num_of_pages: int


class DefaultStats(CamelModel):
    """Number of jobs per application status"""
    pending: int = 0
    interview: int = 0
    declined: int = 0


class MonthlyApplications(CamelModel):
    """Jobs created in one calendar month, labelled like "Jan 2024" """
    date: str
    count: int


class StatsResponse(CamelModel):
    """Schema for /jobs/stats"""
    default_stats: DefaultStats
    monthly_applications: List[MonthlyApplications]
