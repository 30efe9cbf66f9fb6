"""
Database models package.
"""

from app.models.job import Job, JobStatus, JobType
from app.models.user import User

__all__ = ["Job", "JobStatus", "JobType", "User"]
