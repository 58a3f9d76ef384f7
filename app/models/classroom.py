"""Modelos del aula virtual: materiales, evaluaciones y entregas."""
from datetime import date, datetime

from sqlalchemy import (
    BigInteger,
    Date,
    DateTime,
    Double,
    ForeignKey,
    Identity,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base, BigIntPK


class SubmissionStatus:
    """Valores permitidos para el estado de una entrega."""
    PENDING = "pending"
    SUBMITTED = "submitted"


class ClassMaterial(Base):
    """Material publicado para una materia."""

    __tablename__ = "class_materials"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    file_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class Evaluation(Base):
    """Evaluación de una materia con fecha de entrega y puntaje máximo."""

    __tablename__ = "evaluations"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    max_score: Mapped[float] = mapped_column(
        Double, nullable=False, default=100, server_default=text("100")
    )


class StudentSubmission(Base):
    """Entrega de un estudiante; una sola fila por (evaluación, usuario)."""

    __tablename__ = "student_submissions"
    __table_args__ = (
        UniqueConstraint("evaluation_id", "user_id", name="uq_submissions_evaluation_user"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    evaluation_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("evaluations.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default=SubmissionStatus.PENDING, server_default=text("'pending'")
    )
    file_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    score: Mapped[float | None] = mapped_column(Double, nullable=True)
    submitted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


CLASSROOM_TABLES = frozenset(
    {ClassMaterial.__tablename__, Evaluation.__tablename__, StudentSubmission.__tablename__}
)
