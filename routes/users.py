"""
User routes (Controllers).

Registration goes through UserService so the password is never stored in
clear text; the rest of the operations use the generic service.
"""

from fastapi import APIRouter, HTTPException, Depends, status
from typing import List
import logging

from models.users import UserDto, UserCreateDto, UserUpdateDto, UserStatusDto
from models.common import SuccessResponse, create_success_response
from core.exceptions import AppException, NotFoundException
from services.user_service import UserService
from dependencies import get_user_service
from routes.common import handle_service_exception, ensure_same_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[UserDto])
def obtener_usuarios(service: UserService = Depends(get_user_service)):
    try:
        return service.get_all()
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error listing users: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al listar usuarios"
        )


@router.get("/{user_id}", response_model=UserDto)
def obtener_usuario(user_id: int, service: UserService = Depends(get_user_service)):
    try:
        user = service.get_by_id(user_id)
        if user is None:
            raise NotFoundException(resource="Usuario", identifier=str(user_id))
        return user
    except AppException as e:
        raise handle_service_exception(e)


@router.post("/", response_model=UserDto, status_code=status.HTTP_201_CREATED)
def crear_usuario(user: UserCreateDto, service: UserService = Depends(get_user_service)):
    """
    Register a new user for an existing person.

    The response never includes the password, its salt or its hash.
    """
    try:
        return service.add_from_create_dto(user)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error creating user: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al crear usuario"
        )


@router.put("/{user_id}", response_model=UserDto)
def actualizar_usuario(
    user_id: int,
    user: UserUpdateDto,
    service: UserService = Depends(get_user_service),
):
    try:
        ensure_same_id(user_id, user.id)
        return service.update(user)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error updating user {user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al actualizar usuario"
        )


@router.patch("/active", response_model=SuccessResponse)
def cambiar_estado_usuario(
    status_dto: UserStatusDto,
    service: UserService = Depends(get_user_service),
):
    try:
        if not service.set_active(status_dto):
            raise NotFoundException(resource="Usuario", identifier=str(status_dto.id))
        return create_success_response(
            "Estado de usuario actualizado",
            {"id": status_dto.id, "active": status_dto.active},
        )
    except AppException as e:
        raise handle_service_exception(e)


@router.delete("/{user_id}", response_model=SuccessResponse)
def eliminar_usuario(user_id: int, service: UserService = Depends(get_user_service)):
    try:
        service.delete(user_id)
        return create_success_response("Usuario eliminado", {"id": user_id})
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error deleting user {user_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al eliminar usuario"
        )
