"""Inscripción del periodo: lectura y reemplazo atómico del conjunto de materias."""
import logging
from typing import Any

from sqlalchemy import delete, insert, select

from app.core.database import Database
from app.models import Enrollment, Subject, User
from app.schemas.catalogo import SubjectItem
from app.schemas.inscripcion import EnrolledSubjectIn
from app.services.catalogo_service import id_por_codigo_estudiante, ids_por_codigo_materia

logger = logging.getLogger(__name__)


async def obtener_inscripcion(db: Database, student_code: str, period: str) -> list[dict[str, Any]]:
    """Materias inscritas del estudiante en el periodo.

    Cada fila combina las columnas de la materia con los campos del horario
    guardado; el horario se aplica al final y prevalece si una clave coincide.
    """
    q = (
        select(Subject, Enrollment.schedule_data)
        .join(Enrollment, Enrollment.subject_id == Subject.id)
        .join(User, User.id == Enrollment.user_id)
        .where(User.student_code == student_code, Enrollment.period == period)
        .order_by(Enrollment.id)
    )
    async with db.session() as session:
        result = await session.execute(q)
        filas = result.all()

    inscripciones = []
    for materia, horario in filas:
        fila = SubjectItem.model_validate(materia).model_dump()
        fila.update(horario or {})
        inscripciones.append(fila)
    return inscripciones


async def guardar_inscripcion(
    db: Database,
    student_code: str,
    period: str,
    materias: list[EnrolledSubjectIn],
) -> int:
    """Reemplaza la inscripción del estudiante en el periodo por ``materias``.

    Borra el conjunto anterior e inserta el nuevo en una sola transacción; si
    algo falla, el conjunto anterior queda intacto. Los códigos que no existen
    en el catálogo se omiten. Devuelve la cantidad de filas insertadas.
    """
    filas: list[dict[str, Any]] = []
    async with db.transaction() as session:
        user_id = await id_por_codigo_estudiante(session, student_code)

        await session.execute(
            delete(Enrollment).where(Enrollment.user_id == user_id, Enrollment.period == period)
        )

        if materias:
            ids = await ids_por_codigo_materia(session, [m.codigo for m in materias])
            vistas: set[int] = set()
            for materia in materias:
                subject_id = ids.get(materia.codigo)
                if subject_id is None:
                    logger.info("Materia %s no existe en el catálogo; se omite", materia.codigo)
                    continue
                # Una fila por materia y periodo: gana la primera aparición
                if subject_id in vistas:
                    continue
                vistas.add(subject_id)
                filas.append(
                    {
                        "user_id": user_id,
                        "subject_id": subject_id,
                        "period": period,
                        "schedule_data": materia.schedule().to_document(),
                    }
                )
            if filas:
                await session.execute(insert(Enrollment), filas)

    logger.info(
        "Inscripción guardada: estudiante=%s periodo=%s materias=%d",
        student_code, period, len(filas),
    )
    return len(filas)
