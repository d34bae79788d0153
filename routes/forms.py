"""
Form routes - CRUD genérico más activación lógica y actualización parcial.
"""

from fastapi import Depends

from routes.common import build_crud_router, handle_service_exception
from dependencies import get_form_service
from core.exceptions import AppException
from models.forms import FormDto, FormUpdateDto, FormStatusDto
from services.base_service import BaseService

router = build_crud_router(
    prefix="/forms",
    resource="Formulario",
    get_service=get_form_service,
    dto_class=FormDto,
    update_dto_class=FormUpdateDto,
    status_dto_class=FormStatusDto,
)


@router.patch("/", response_model=FormDto)
def actualizar_parcial_formulario(
    form: FormUpdateDto,
    service: BaseService = Depends(get_form_service),
):
    """Update only the fields sent (not null) of the form identified in the body."""
    try:
        return service.update(form)
    except AppException as e:
        raise handle_service_exception(e)
