"""Script para insertar carreras, menciones y materias iniciales."""
import asyncio
import sys
from pathlib import Path

# Asegurar que el proyecto esté en el path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select
from app.core.config import settings
from app.core.database import Database, sincronizar_identidad
from app.models import Career, Specialization, Subject


CARRERAS = [
    (1, "Ciencias Náuticas"),
    (2, "Ingeniería Marítima"),
]

# (id, nombre, carrera)
MENCIONES = [
    (1, "Navegación", 1),
    (2, "Máquinas Marinas", 1),
    (3, "Transporte Marítimo", 2),
]

# (código, nombre, semestre, créditos, mención); mención None = común
MATERIAS = [
    ("MAT101", "Matemática I", 1, 4, None),
    ("FIS101", "Física I", 1, 4, None),
    ("ING101", "Inglés Técnico I", 1, 2, None),
    ("MAT201", "Matemática II", 2, 4, None),
    ("NAV201", "Navegación Costera", 2, 3, 1),
    ("MAQ201", "Termodinámica", 2, 3, 2),
    ("TRM201", "Logística Portuaria", 2, 3, 3),
    ("NAV301", "Navegación Astronómica", 3, 3, 1),
    ("MAQ301", "Motores Diésel Marinos", 3, 4, 2),
]


async def seed_catalogo():
    db = Database.from_settings(settings)
    await db.start()
    try:
        async with db.transaction() as session:
            for career_id, nombre in CARRERAS:
                if await session.get(Career, career_id) is None:
                    session.add(Career(id=career_id, name=nombre))
                    print(f"  + Carrera {nombre}")
            await session.flush()
            await sincronizar_identidad(session, Career)
            for mencion_id, nombre, career_id in MENCIONES:
                if await session.get(Specialization, mencion_id) is None:
                    session.add(Specialization(id=mencion_id, name=nombre, career_id=career_id))
                    print(f"  + Mención {nombre}")
            await session.flush()
            await sincronizar_identidad(session, Specialization)
            for code, nombre, semestre, creditos, mencion_id in MATERIAS:
                result = await session.execute(select(Subject).where(Subject.code == code))
                if result.scalar_one_or_none() is None:
                    session.add(
                        Subject(
                            code=code,
                            name=nombre,
                            semester=semestre,
                            credits=creditos,
                            specialization_id=mencion_id,
                        )
                    )
                    print(f"  + {code} {nombre}")
                else:
                    print(f"  = {code} (ya existe)")
    finally:
        await db.dispose()
    print("Listo.")


if __name__ == "__main__":
    asyncio.run(seed_catalogo())
