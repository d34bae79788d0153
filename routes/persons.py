"""
Person routes (Controllers) - Layered Architecture.

This module handles HTTP requests/responses for person endpoints.
All business logic is delegated to the PersonService layer.

Responsibilities:
- Parse HTTP requests
- Delegate to service layer
- Map False/None results to 404 and validation errors to 400
"""

from fastapi import APIRouter, HTTPException, Depends, status
from typing import List
import logging

from models.persons import PersonDto, PersonUpdateDto, PersonStatusDto
from models.common import SuccessResponse, create_success_response
from core.exceptions import AppException, NotFoundException
from services.person_service import PersonService
from dependencies import get_person_service
from routes.common import handle_service_exception, ensure_same_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/persons", tags=["persons"])


@router.get("/", response_model=List[PersonDto])
def obtener_personas(service: PersonService = Depends(get_person_service)):
    """Get every person (no filtering)."""
    try:
        return service.get_all()
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error listing persons: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al listar personas"
        )


@router.get("/{person_id}", response_model=PersonDto)
def obtener_persona(person_id: int, service: PersonService = Depends(get_person_service)):
    """
    Get a person by ID.

    Raises:
        404 if the person does not exist
    """
    try:
        person = service.get_by_id(person_id)
        if person is None:
            raise NotFoundException(resource="Persona", identifier=str(person_id))
        return person
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error getting person {person_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al obtener persona"
        )


@router.post("/", response_model=PersonDto, status_code=status.HTTP_201_CREATED)
def crear_persona(person: PersonDto, service: PersonService = Depends(get_person_service)):
    """
    Register a new person.

    The identification number must not belong to another (non-deleted) person.
    The creation date is assigned by the server.
    """
    try:
        return service.add_from_create_dto(person)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error creating person: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al crear persona"
        )


@router.put("/{person_id}", response_model=PersonDto)
def actualizar_persona(
    person_id: int,
    person: PersonUpdateDto,
    service: PersonService = Depends(get_person_service),
):
    """
    Update a person. Fields sent as null keep their stored value.
    """
    try:
        ensure_same_id(person_id, person.id)
        return service.update(person)
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error updating person {person_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al actualizar persona"
        )


@router.patch("/", response_model=SuccessResponse)
def actualizar_parcial_persona(
    person: PersonUpdateDto,
    service: PersonService = Depends(get_person_service),
):
    """
    Overwrite the personal data fields (names, phone and document) of a person.
    """
    try:
        if not service.patch_person(person):
            raise NotFoundException(resource="Persona", identifier=str(person.id))
        return create_success_response("Persona actualizada", {"id": person.id})
    except AppException as e:
        raise handle_service_exception(e)


@router.patch("/active", response_model=SuccessResponse)
def cambiar_estado_persona(
    status_dto: PersonStatusDto,
    service: PersonService = Depends(get_person_service),
):
    """Persons are not activable: this always answers 404."""
    try:
        if not service.set_active(status_dto):
            raise NotFoundException(resource="Persona activable", identifier=str(status_dto.id))
        return create_success_response("Estado de persona actualizado", {"id": status_dto.id})
    except AppException as e:
        raise handle_service_exception(e)


@router.delete("/{person_id}", response_model=SuccessResponse)
def eliminar_persona(person_id: int, service: PersonService = Depends(get_person_service)):
    """Delete a person permanently. Deleting a missing person is not an error."""
    try:
        service.delete(person_id)
        return create_success_response("Persona eliminada", {"id": person_id})
    except AppException as e:
        raise handle_service_exception(e)
    except Exception as e:
        logger.error(f"Error deleting person {person_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error al eliminar persona"
        )
