"""Fixtures: base SQLite por test, catálogo sembrado y cliente HTTP contra la app."""
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

from app.core.database import Database
from app.core.security import hash_password
from app.main import create_app
from app.models import Career, ClassMaterial, Evaluation, Role, Specialization, Subject, User

PASSWORD = "clave123"


def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'miumc_test.db'}"


async def sembrar(db: Database) -> None:
    async with db.transaction() as session:
        session.add_all(
            [
                Career(id=1, name="Ciencias Náuticas"),
                Career(id=2, name="Ingeniería Marítima"),
            ]
        )
        await session.flush()
        session.add_all(
            [
                Specialization(id=1, name="Navegación", career_id=1),
                Specialization(id=5, name="Máquinas Marinas", career_id=1),
                Specialization(id=6, name="Transporte Marítimo", career_id=2),
            ]
        )
        await session.flush()
        session.add_all(
            [
                Subject(id=1, code="MAT101", name="Matemática I", semester=1, specialization_id=None),
                Subject(id=2, code="FIS201", name="Física II", semester=2, specialization_id=5),
                Subject(id=3, code="NAV301", name="Navegación Astronómica", semester=3, specialization_id=1),
            ]
        )
        session.add_all(
            [
                User(
                    student_code="A001",
                    email="a001@umc.edu.ve",
                    password_hash=hash_password(PASSWORD),
                    full_name="Ana Pérez",
                    role=Role.CADETE,
                    career_id=1,
                    specialization_id=5,
                    birth_date=date(2004, 3, 14),
                ),
                User(
                    student_code="A002",
                    email="a002@umc.edu.ve",
                    # Fila anterior al hash: credencial guardada en texto
                    password_hash="legacy",
                    full_name="Bruno Díaz",
                    role=Role.CADETE,
                ),
                User(
                    student_code="ADM01",
                    email="admin@umc.edu.ve",
                    password_hash=hash_password("admin"),
                    full_name="Zoe Admin",
                    role=Role.ADMIN,
                ),
            ]
        )


async def sembrar_aula(db: Database) -> None:
    async with db.transaction() as session:
        session.add_all(
            [
                Evaluation(id=1, subject_id=1, title="Parcial 1", due_date=date(2026, 3, 1), max_score=20),
                Evaluation(id=2, subject_id=1, title="Parcial 2", due_date=date(2026, 4, 1), max_score=20),
                Evaluation(id=3, subject_id=2, title="Laboratorio", max_score=10),
                ClassMaterial(id=1, subject_id=1, title="Guía 1"),
                ClassMaterial(id=2, subject_id=1, title="Guía 2"),
            ]
        )


async def user_id(db: Database, student_code: str) -> int:
    async with db.session() as session:
        return await session.scalar(select(User.id).where(User.student_code == student_code))


@pytest.fixture
async def db(tmp_path):
    database = Database(sqlite_url(tmp_path), pool_size=5, max_overflow=0, pool_timeout=5)
    await database.start()
    await sembrar(database)
    await sembrar_aula(database)
    yield database
    await database.dispose()


async def _client_for(database: Database):
    app = create_app(database)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def client(db):
    async with await _client_for(db) as ac:
        yield ac


@pytest.fixture
def make_client():
    """Cliente contra un pool arbitrario (aula deshabilitada, pool pequeño, etc.)."""
    return _client_for
