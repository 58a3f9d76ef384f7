"""Endpoint de onboarding: perfil del cadete y materias aprobadas previas."""
from fastapi import APIRouter, Depends

from app.core.database import Database, get_database
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.onboarding import OnboardingRequest
from app.services import cuenta_service

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.post(
    "/complete",
    response_model=MessageResponse,
    summary="Completar onboarding",
    description=(
        "Actualiza nombre, edad, fecha de nacimiento, teléfono, carrera y mención, "
        "y registra las materias aprobadas sin duplicar las existentes."
    ),
    responses={404: {"model": ErrorResponse, "description": "Código de estudiante inexistente"}},
)
async def completar_onboarding(body: OnboardingRequest, db: Database = Depends(get_database)):
    await cuenta_service.completar_onboarding(
        db,
        body.student_code,
        full_name=body.full_name,
        age=body.age,
        birth_date=body.birth_date,
        phone=body.phone,
        career_id=body.career_id,
        mencion_id=body.mencion_id,
        approved_subjects=body.approved_subjects,
    )
    return MessageResponse(message="Perfil completado correctamente")
