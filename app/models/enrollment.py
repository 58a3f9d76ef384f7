"""Modelo Inscripción (usuario–materia–periodo con horario embebido)."""
from typing import Any

from sqlalchemy import JSON, BigInteger, ForeignKey, Identity, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base, BigIntPK


class Enrollment(Base):
    """Inscripción de un usuario en una materia para un periodo (ej. 2026-I).

    ``schedule_data`` guarda el horario elegido como documento opaco; no tiene
    identidad propia fuera de la fila.
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "subject_id", "period",
            name="uq_enrollments_user_subject_period",
        ),
    )

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    subject_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False
    )
    period: Mapped[str] = mapped_column(Text, nullable=False)
    schedule_data: Mapped[dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=dict
    )
