"""Modelo Récord académico (materias aprobadas antes del periodo actual)."""
from sqlalchemy import BigInteger, ForeignKey, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class RecordStatus:
    """Valores permitidos para el estado del récord."""
    APROBADA = "aprobada"


class AcademicRecord(Base):
    """Par (usuario, materia) único; reafirmar una aprobada no duplica la fila."""

    __tablename__ = "academic_records"

    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    subject_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("subjects.id", ondelete="CASCADE"), primary_key=True
    )
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default=RecordStatus.APROBADA, server_default=text("'aprobada'")
    )
