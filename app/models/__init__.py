"""Modelos SQLAlchemy (tablas de la base de datos)."""
from app.models.career import Career
from app.models.specialization import Specialization
from app.models.subject import Subject
from app.models.user import Role, User
from app.models.academic_record import AcademicRecord, RecordStatus
from app.models.enrollment import Enrollment
from app.models.classroom import (
    ClassMaterial,
    Evaluation,
    StudentSubmission,
    SubmissionStatus,
)

__all__ = [
    "Career",
    "Specialization",
    "Subject",
    "Role",
    "User",
    "AcademicRecord",
    "RecordStatus",
    "Enrollment",
    "ClassMaterial",
    "Evaluation",
    "StudentSubmission",
    "SubmissionStatus",
]
