"""
Assignment and submission data types.
Shared shapes for course assignments, student submissions and the
instructor tracking dashboard.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum

from app.domain.models.base import parse_timestamp


class SubmissionStatus(str, Enum):
    """Grading state of a submission."""
    SUBMITTED = "submitted"
    GRADED = "graded"
    RETURNED = "returned"


class StudentSubmissionState(str, Enum):
    """Per-student state shown on the tracking dashboard."""
    NOT_SUBMITTED = "not_submitted"
    SUBMITTED = "submitted"
    GRADED = "graded"
    RETURNED = "returned"


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class AssignmentAttachment:
    """File or image provided by the instructor."""

    id: str
    name: str
    url: str
    type: str  # MIME type
    size: int  # bytes
    uploaded_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "type": self.type,
            "size": self.size,
            "uploadedAt": _iso(self.uploaded_at)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssignmentAttachment":
        return cls(
            id=data["id"],
            name=data["name"],
            url=data["url"],
            type=data["type"],
            size=data["size"],
            uploaded_at=parse_timestamp(data.get("uploadedAt"))
        )


@dataclass
class SubmissionFile:
    """File uploaded by a student as part of a submission."""

    id: str
    name: str
    url: str
    type: str  # MIME type
    size: int  # bytes
    uploaded_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "type": self.type,
            "size": self.size,
            "uploadedAt": _iso(self.uploaded_at)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubmissionFile":
        return cls(
            id=data["id"],
            name=data["name"],
            url=data["url"],
            type=data["type"],
            size=data["size"],
            uploaded_at=parse_timestamp(data.get("uploadedAt"))
        )


@dataclass
class Assignment:
    """
    Assignment published to a course.

    ``max_attempts`` of 0 means unlimited attempts and an empty
    ``group_ids`` list targets every student in the course.
    """

    id: str
    course_id: str
    title: str
    description: str = ""
    instructions: str = ""

    # Timing
    start_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    allow_late_submission: bool = False
    late_penalty_percentage: Optional[float] = None  # per day late
    cutoff_date: Optional[datetime] = None  # hard deadline when late submissions are allowed

    # Attempts
    max_attempts: int = 0

    # Files
    allowed_file_types: List[str] = field(default_factory=list)  # e.g. ['.pdf', '.docx']
    max_file_size: float = 10  # MB
    max_files: int = 1

    # Grading
    total_points: float = 100

    # Group scoping
    group_ids: List[str] = field(default_factory=list)

    attachments: List[AssignmentAttachment] = field(default_factory=list)

    # Metadata
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None  # instructor user ID
    published: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using the stored field names."""
        return {
            "id": self.id,
            "courseId": self.course_id,
            "title": self.title,
            "description": self.description,
            "instructions": self.instructions,
            "startDate": _iso(self.start_date),
            "dueDate": _iso(self.due_date),
            "allowLateSubmission": self.allow_late_submission,
            "latePenaltyPercentage": self.late_penalty_percentage,
            "cutoffDate": _iso(self.cutoff_date),
            "maxAttempts": self.max_attempts,
            "allowedFileTypes": list(self.allowed_file_types),
            "maxFileSize": self.max_file_size,
            "maxFiles": self.max_files,
            "totalPoints": self.total_points,
            "groupIds": list(self.group_ids),
            "attachments": [a.to_dict() for a in self.attachments],
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "createdBy": self.created_by,
            "published": self.published
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Assignment":
        return cls(
            id=data["id"],
            course_id=data["courseId"],
            title=data["title"],
            description=data.get("description", ""),
            instructions=data.get("instructions", ""),
            start_date=parse_timestamp(data.get("startDate")),
            due_date=parse_timestamp(data.get("dueDate")),
            allow_late_submission=data.get("allowLateSubmission", False),
            late_penalty_percentage=data.get("latePenaltyPercentage"),
            cutoff_date=parse_timestamp(data.get("cutoffDate")),
            max_attempts=data.get("maxAttempts", 0),
            allowed_file_types=list(data.get("allowedFileTypes", [])),
            max_file_size=data.get("maxFileSize", 10),
            max_files=data.get("maxFiles", 1),
            total_points=data.get("totalPoints", 100),
            group_ids=list(data.get("groupIds", [])),
            attachments=[AssignmentAttachment.from_dict(a) for a in data.get("attachments", [])],
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
            created_by=data.get("createdBy"),
            published=data.get("published", False)
        )


@dataclass
class Submission:
    """One attempt by a student at an assignment."""

    id: str
    assignment_id: str
    course_id: str
    student_id: str
    attempt_number: int = 1

    files: List[SubmissionFile] = field(default_factory=list)
    text: Optional[str] = None

    submitted_at: Optional[datetime] = None
    is_late: bool = False

    # Grading
    status: SubmissionStatus = SubmissionStatus.SUBMITTED
    grade: Optional[float] = None
    feedback: Optional[str] = None
    graded_at: Optional[datetime] = None
    graded_by: Optional[str] = None  # instructor user ID

    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using the stored field names."""
        return {
            "id": self.id,
            "assignmentId": self.assignment_id,
            "courseId": self.course_id,
            "studentId": self.student_id,
            "attemptNumber": self.attempt_number,
            "files": [f.to_dict() for f in self.files],
            "text": self.text,
            "submittedAt": _iso(self.submitted_at),
            "isLate": self.is_late,
            "status": self.status.value,
            "grade": self.grade,
            "feedback": self.feedback,
            "gradedAt": _iso(self.graded_at),
            "gradedBy": self.graded_by,
            "updatedAt": _iso(self.updated_at)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Submission":
        return cls(
            id=data["id"],
            assignment_id=data["assignmentId"],
            course_id=data["courseId"],
            student_id=data["studentId"],
            attempt_number=data.get("attemptNumber", 1),
            files=[SubmissionFile.from_dict(f) for f in data.get("files", [])],
            text=data.get("text"),
            submitted_at=parse_timestamp(data.get("submittedAt")),
            is_late=data.get("isLate", False),
            status=SubmissionStatus(data.get("status", SubmissionStatus.SUBMITTED.value)),
            grade=data.get("grade"),
            feedback=data.get("feedback"),
            graded_at=parse_timestamp(data.get("gradedAt")),
            graded_by=data.get("gradedBy"),
            updated_at=parse_timestamp(data.get("updatedAt"))
        )


@dataclass
class SubmissionSummary:
    """Aggregate counts for the instructor tracking dashboard."""

    assignment_id: str
    total_students: int = 0
    submitted: int = 0
    not_submitted: int = 0
    graded: int = 0
    late_submissions: int = 0
    average_grade: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "assignmentId": self.assignment_id,
            "totalStudents": self.total_students,
            "submitted": self.submitted,
            "notSubmitted": self.not_submitted,
            "graded": self.graded,
            "lateSubmissions": self.late_submissions,
            "averageGrade": self.average_grade
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubmissionSummary":
        """Create from dictionary."""
        return cls(
            assignment_id=data["assignmentId"],
            total_students=data.get("totalStudents", 0),
            submitted=data.get("submitted", 0),
            not_submitted=data.get("notSubmitted", 0),
            graded=data.get("graded", 0),
            late_submissions=data.get("lateSubmissions", 0),
            average_grade=data.get("averageGrade")
        )


@dataclass
class StudentSubmissionStatus:
    """One dashboard row: where a single student stands on an assignment."""

    student_id: str
    student_name: str
    student_email: str
    has_submitted: bool = False
    attempt_count: int = 0
    latest_submission: Optional[Submission] = None
    is_late: bool = False
    grade: Optional[float] = None
    status: StudentSubmissionState = StudentSubmissionState.NOT_SUBMITTED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "studentEmail": self.student_email,
            "hasSubmitted": self.has_submitted,
            "attemptCount": self.attempt_count,
            "latestSubmission": self.latest_submission.to_dict() if self.latest_submission else None,
            "isLate": self.is_late,
            "grade": self.grade,
            "status": self.status.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StudentSubmissionStatus":
        """Create from dictionary."""
        latest = data.get("latestSubmission")
        return cls(
            student_id=data["studentId"],
            student_name=data.get("studentName", ""),
            student_email=data.get("studentEmail", ""),
            has_submitted=data.get("hasSubmitted", False),
            attempt_count=data.get("attemptCount", 0),
            latest_submission=Submission.from_dict(latest) if latest else None,
            is_late=data.get("isLate", False),
            grade=data.get("grade"),
            status=StudentSubmissionState(data.get("status", StudentSubmissionState.NOT_SUBMITTED.value))
        )
