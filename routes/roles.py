"""
Rol routes - CRUD genérico más activación lógica, actualización parcial
y consulta de los roles asignados a un usuario.
"""

from fastapi import Depends
from typing import List

from routes.common import build_crud_router, handle_service_exception, ensure_same_id
from dependencies import get_rol_service
from core.exceptions import AppException
from models.roles import RolDto, RolUpdateDto, RolStatusDto
from services.rol_service import RolService

router = build_crud_router(
    prefix="/roles",
    resource="Rol",
    get_service=get_rol_service,
    dto_class=RolDto,
    update_dto_class=RolUpdateDto,
    status_dto_class=RolStatusDto,
)


@router.get("/user/{user_id}", response_model=List[RolDto])
def obtener_roles_usuario(user_id: int, service: RolService = Depends(get_rol_service)):
    """
    Get the roles assigned to a user.

    Raises:
        404 if the user does not exist
    """
    try:
        return service.get_by_user(user_id)
    except AppException as e:
        raise handle_service_exception(e)


@router.patch("/{rol_id}", response_model=RolDto)
def actualizar_parcial_rol(
    rol_id: int,
    rol: RolUpdateDto,
    service: RolService = Depends(get_rol_service),
):
    """Update only the fields sent (not null) of a rol."""
    try:
        ensure_same_id(rol_id, rol.id)
        return service.update(rol)
    except AppException as e:
        raise handle_service_exception(e)
