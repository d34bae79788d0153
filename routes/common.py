"""
Utilidades compartidas por los routers.

- Conversión de excepciones de servicio a respuestas HTTP
- Router CRUD genérico para entidades que usan el servicio base sin reglas propias
"""

from typing import Callable, List, Optional, Type
import logging

from fastapi import APIRouter, HTTPException, Depends, status
from pydantic import BaseModel

from core.exceptions import AppException, NotFoundException, ValidationException
from models.common import SuccessResponse, create_success_response
from services.base_service import BaseService

logger = logging.getLogger(__name__)


# ==================== Exception Handler ====================

def handle_service_exception(e: Exception) -> HTTPException:
    """Convert service layer exceptions to HTTP exceptions."""
    if isinstance(e, NotFoundException):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    elif isinstance(e, ValidationException):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    elif isinstance(e, AppException):
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    else:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor"
        )


def ensure_same_id(path_id: int, body_id: int) -> None:
    """Valida que el ID de la ruta coincida con el del cuerpo."""
    if path_id != body_id:
        raise ValidationException("El ID de la ruta no coincide con el del cuerpo")


# ==================== Generic CRUD Router ====================

def build_crud_router(
    prefix: str,
    resource: str,
    get_service: Callable[..., BaseService],
    dto_class: Type[BaseModel],
    update_dto_class: Type[BaseModel],
    status_dto_class: Optional[Type[BaseModel]] = None,
) -> APIRouter:
    """
    Construye un router con GET/POST/PUT/DELETE (y PATCH /active si la entidad es activable).

    Args:
        prefix: Prefijo de la ruta (p. ej. "/roles")
        resource: Nombre legible del recurso para los mensajes
        get_service: Dependencia que entrega el servicio del request
        dto_class: DTO de lectura/creación
        update_dto_class: DTO de actualización
        status_dto_class: DTO de activación; None si la entidad no es activable

    Returns:
        El router configurado
    """
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.get("/", response_model=List[dto_class])
    def get_all(service: BaseService = Depends(get_service)):
        try:
            return service.get_all()
        except AppException as e:
            raise handle_service_exception(e)
        except Exception as e:
            logger.error(f"Error listing {resource}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error al listar {resource}"
            )

    @router.get("/{item_id}", response_model=dto_class)
    def get_by_id(item_id: int, service: BaseService = Depends(get_service)):
        try:
            item = service.get_by_id(item_id)
            if item is None:
                raise NotFoundException(resource=resource, identifier=str(item_id))
            return item
        except AppException as e:
            raise handle_service_exception(e)
        except Exception as e:
            logger.error(f"Error getting {resource} {item_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error al obtener {resource}"
            )

    @router.post("/", response_model=dto_class, status_code=status.HTTP_201_CREATED)
    def create(dto: dto_class, service: BaseService = Depends(get_service)):
        try:
            return service.add(dto)
        except AppException as e:
            raise handle_service_exception(e)
        except Exception as e:
            logger.error(f"Error creating {resource}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error al crear {resource}"
            )

    @router.put("/{item_id}", response_model=dto_class)
    def update(item_id: int, dto: update_dto_class, service: BaseService = Depends(get_service)):
        try:
            ensure_same_id(item_id, dto.id)
            return service.update(dto)
        except AppException as e:
            raise handle_service_exception(e)
        except Exception as e:
            logger.error(f"Error updating {resource} {item_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error al actualizar {resource}"
            )

    if status_dto_class is not None:
        @router.patch("/active", response_model=SuccessResponse)
        def set_active(dto: status_dto_class, service: BaseService = Depends(get_service)):
            try:
                if not service.set_active(dto):
                    raise NotFoundException(resource=resource, identifier=str(dto.id))
                return create_success_response(f"Estado de {resource} actualizado", {"id": dto.id, "active": dto.active})
            except AppException as e:
                raise handle_service_exception(e)

    @router.delete("/{item_id}", response_model=SuccessResponse)
    def delete(item_id: int, service: BaseService = Depends(get_service)):
        try:
            service.delete(item_id)
            return create_success_response(f"{resource} eliminado", {"id": item_id})
        except AppException as e:
            raise handle_service_exception(e)
        except Exception as e:
            logger.error(f"Error deleting {resource} {item_id}: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error al eliminar {resource}"
            )

    return router
