import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class JobStatus(str, enum.Enum):
    """
    Application status enum.

    - PENDING: Application sent, no answer yet
    - INTERVIEW: Interview scheduled or in progress
    - DECLINED: Application rejected
    """
    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"


class JobType(str, enum.Enum):
    """Employment type of the position applied for."""
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    INTERNSHIP = "internship"
    CONTRACT = "contract"


class Job(Base):
    """
    Job model representing a single tracked job application.
    Every job belongs to exactly one user (created_by).
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    company = Column(String(50), nullable=False)
    position = Column(String(100), nullable=False, index=True)
    status = Column(Enum(JobStatus), default=JobStatus.PENDING, nullable=False, index=True)
    job_type = Column(Enum(JobType), default=JobType.FULL_TIME, nullable=False)

    # Owner - all reads and writes are scoped by this column
    created_by = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    owner = relationship("User", back_populates="jobs")

    def __repr__(self):
        return f"<Job(id={self.id}, position='{self.position}', status={self.status.value})>"
