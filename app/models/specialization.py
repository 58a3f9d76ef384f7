"""Modelo Mención (especialización dentro de una carrera)."""
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Identity, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.career import Career
    from app.models.subject import Subject


class Specialization(Base):
    """Mención: pertenece a exactamente una carrera."""

    __tablename__ = "specializations"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    career_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("careers.id"), nullable=False
    )

    career: Mapped["Career"] = relationship("Career", back_populates="specializations")
    subjects: Mapped[list["Subject"]] = relationship("Subject", back_populates="specialization")
