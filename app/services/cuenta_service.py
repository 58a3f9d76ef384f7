"""Cuentas de usuario: login, registro y onboarding."""
import logging
from datetime import date

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError

from app.core.database import Database, dialect_insert
from app.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from app.core.security import hash_password, verify_password
from app.models import AcademicRecord, Career, RecordStatus, Role, Specialization, User
from app.schemas.auth import UserOut
from app.services.catalogo_service import ids_por_codigo_materia

logger = logging.getLogger(__name__)

TELEFONO_POR_DEFECTO = "Sin teléfono"
CARRERA_POR_DEFECTO = 1
MENCION_POR_DEFECTO = 1


def consulta_usuarios() -> Select:
    """Usuarios con el nombre de su carrera y mención (LEFT JOIN: pueden no tener)."""
    return (
        select(
            User,
            Career.name.label("career_name"),
            Specialization.name.label("mencion_name"),
        )
        .outerjoin(Career, Career.id == User.career_id)
        .outerjoin(Specialization, Specialization.id == User.specialization_id)
    )


def usuario_out(usuario: User, career_name: str | None, mencion_name: str | None) -> UserOut:
    # La credencial guardada nunca sale en la respuesta
    return UserOut(
        id=usuario.id,
        student_code=usuario.student_code,
        email=usuario.email,
        full_name=usuario.full_name,
        role=usuario.role,
        age=usuario.age,
        birth_date=usuario.birth_date,
        phone=usuario.phone,
        career_id=usuario.career_id,
        specialization_id=usuario.specialization_id,
        career_name=career_name,
        mencion_name=mencion_name,
    )


async def iniciar_sesion(db: Database, student_code: str, password: str) -> UserOut:
    async with db.session() as session:
        result = await session.execute(
            consulta_usuarios().where(User.student_code == student_code)
        )
        fila = result.first()
    if fila is None:
        raise NotFoundError("Usuario no encontrado")
    usuario, career_name, mencion_name = fila
    if not verify_password(password, usuario.password_hash):
        raise UnauthorizedError("Contraseña incorrecta")
    logger.info("Inicio de sesión: %s", student_code)
    return usuario_out(usuario, career_name, mencion_name)


async def registrar(db: Database, student_code: str, email: str, password: str) -> int:
    """Crea la cuenta con nombre vacío y rol cadete. Código repetido: ConflictError."""
    password_hash = hash_password(password)
    async with db.transaction() as session:
        existente = await session.scalar(select(User.id).where(User.student_code == student_code))
        if existente is not None:
            raise ConflictError("El código de estudiante ya está registrado")
        usuario = User(
            student_code=student_code,
            email=email,
            password_hash=password_hash,
            full_name="",
            role=Role.CADETE,
        )
        session.add(usuario)
        try:
            await session.flush()
        except IntegrityError as exc:
            # Otro registro concurrente ganó la restricción única
            raise ConflictError("El código de estudiante ya está registrado") from exc
        user_id = usuario.id
    logger.info("Cuenta registrada: %s (id=%s)", student_code, user_id)
    return user_id


async def completar_onboarding(
    db: Database,
    student_code: str,
    *,
    full_name: str,
    age: int | None,
    birth_date: date | None,
    phone: str | None,
    career_id: int | None,
    mencion_id: int | None,
    approved_subjects: list[str],
) -> int:
    """Actualiza el perfil y registra las materias aprobadas sin duplicar las existentes.

    Devuelve la cantidad de códigos reconocidos en el catálogo.
    """
    reconocidas = 0
    async with db.transaction() as session:
        result = await session.execute(select(User).where(User.student_code == student_code))
        usuario = result.scalar_one_or_none()
        if usuario is None:
            raise NotFoundError("Usuario no encontrado")

        usuario.full_name = full_name
        usuario.age = age
        usuario.birth_date = birth_date
        usuario.phone = phone or TELEFONO_POR_DEFECTO
        usuario.career_id = career_id or CARRERA_POR_DEFECTO
        usuario.specialization_id = mencion_id or MENCION_POR_DEFECTO
        await session.flush()

        if approved_subjects:
            ids = await ids_por_codigo_materia(session, approved_subjects)
            reconocidas = len(ids)
            if ids:
                stmt = dialect_insert(session, AcademicRecord).values(
                    [
                        {"user_id": usuario.id, "subject_id": subject_id, "status": RecordStatus.APROBADA}
                        for subject_id in sorted(ids.values())
                    ]
                )
                await session.execute(
                    stmt.on_conflict_do_nothing(index_elements=["user_id", "subject_id"])
                )
    logger.info("Onboarding completado: %s (%d materias aprobadas)", student_code, reconocidas)
    return reconocidas
