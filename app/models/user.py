"""Modelo Usuario (cadetes y administradores)."""
from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, Identity, Integer, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base, BigIntPK

if TYPE_CHECKING:
    from app.models.career import Career
    from app.models.specialization import Specialization


class Role:
    """Valores permitidos para el rol del usuario."""
    CADETE = "cadete"
    ADMIN = "admin"


class User(Base):
    """Usuario del portal. El código de estudiante es la clave natural usada en las URLs."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(BigIntPK, Identity(), primary_key=True)
    student_code: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    full_name: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=text("''")
    )
    role: Mapped[str] = mapped_column(
        Text, nullable=False, default=Role.CADETE, server_default=text("'cadete'")
    )
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    career_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("careers.id"), nullable=True
    )
    specialization_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("specializations.id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    career: Mapped["Career | None"] = relationship("Career")
    specialization: Mapped["Specialization | None"] = relationship("Specialization")
