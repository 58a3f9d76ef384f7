"""Script para crear un administrador y un cadete de prueba en la tabla users."""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select
from app.core.config import settings
from app.core.database import Database
from app.core.security import hash_password
from app.models import Role, User

# (código, correo, nombre, rol); contraseña de prueba común, se guarda hasheada con bcrypt
USUARIOS = [
    ("ADMIN01", "admin@umc.edu.ve", "Administrador Prueba", Role.ADMIN),
    ("C2026001", "cadete@umc.edu.ve", "Cadete Prueba", Role.CADETE),
]
PASSWORD_PLAIN = "1234"


async def seed_usuario_prueba():
    password_hash = hash_password(PASSWORD_PLAIN)
    db = Database.from_settings(settings)
    await db.start()
    try:
        async with db.transaction() as session:
            for code, email, nombre, rol in USUARIOS:
                result = await session.execute(select(User).where(User.student_code == code))
                usuario = result.scalar_one_or_none()
                if not usuario:
                    session.add(
                        User(
                            student_code=code,
                            email=email,
                            full_name=nombre,
                            role=rol,
                            password_hash=password_hash,
                        )
                    )
                    print(f"  + Usuario creado: {code} ({rol})")
                else:
                    usuario.password_hash = password_hash
                    print(f"  + Contraseña actualizada para: {code}")
    finally:
        await db.dispose()
    print("Listo.")
    for code, *_ in USUARIOS:
        print(f"  Login: {code} / {PASSWORD_PLAIN}")


if __name__ == "__main__":
    asyncio.run(seed_usuario_prueba())
