"""Modelo Carrera."""
from typing import TYPE_CHECKING

from sqlalchemy import Identity, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.specialization import Specialization


class Career(Base):
    """Carrera: dato de referencia inmutable (ej. Ingeniería de Sistemas)."""

    __tablename__ = "careers"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    specializations: Mapped[list["Specialization"]] = relationship(
        "Specialization", back_populates="career"
    )
