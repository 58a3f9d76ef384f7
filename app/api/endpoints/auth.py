"""Endpoints de autenticación: login y registro."""
from fastapi import APIRouter, Depends

from app.core.database import Database, get_database
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from app.schemas.common import ErrorResponse, MessageResponse
from app.services import cuenta_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Iniciar sesión",
    responses={
        200: {"description": "Credenciales correctas, se devuelve el usuario"},
        401: {"model": ErrorResponse, "description": "Contraseña incorrecta"},
        404: {"model": ErrorResponse, "description": "Código de estudiante inexistente"},
    },
)
async def login(data: LoginRequest, db: Database = Depends(get_database)):
    """Autenticación con **código de estudiante** y **contraseña**."""
    usuario = await cuenta_service.iniciar_sesion(db, data.student_code, data.password)
    return LoginResponse(user=usuario)


@router.post(
    "/register",
    response_model=MessageResponse,
    summary="Registrar cuenta",
    responses={409: {"model": ErrorResponse, "description": "El código ya está registrado"}},
)
async def register(data: RegisterRequest, db: Database = Depends(get_database)):
    """Crea la cuenta con rol cadete; el perfil se completa en el onboarding."""
    await cuenta_service.registrar(db, data.student_code, data.email, data.password)
    return MessageResponse(message="Cuenta creada correctamente")
