"""Modelo Materia."""
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Identity, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.specialization import Specialization


class Subject(Base):
    """Materia: ej. MAT101 Cálculo I. Sin mención = común a toda la carrera."""

    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    # Identificador externo con el que el cliente envía sus materias
    code: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    semester: Mapped[int] = mapped_column(Integer, nullable=False)
    credits: Mapped[int | None] = mapped_column(Integer, nullable=True)
    specialization_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("specializations.id"), nullable=True
    )

    specialization: Mapped["Specialization | None"] = relationship(
        "Specialization", back_populates="subjects"
    )
