"""Utilidades de seguridad: hash y verificación de contraseñas."""
import hmac

import bcrypt

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(plain_password: str) -> str:
    """Genera el hash bcrypt de la contraseña en texto."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def is_hashed(stored_password: str) -> bool:
    return stored_password.startswith(_BCRYPT_PREFIXES)


def verify_password(plain_password: str, stored_password: str) -> bool:
    """Comprueba la contraseña contra el valor guardado.

    Las cuentas nuevas guardan un hash bcrypt. Las filas cargadas antes del
    hash conservan el valor en texto; se comparan en tiempo constante.
    """
    if not stored_password:
        return False
    if not is_hashed(stored_password):
        return hmac.compare_digest(
            plain_password.encode("utf-8"), stored_password.encode("utf-8")
        )
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            stored_password.encode("utf-8"),
        )
    except ValueError:
        return False
