"""
Service for Person business logic.

Agrega al servicio genérico el registro con validación de documento único
y la actualización parcial de datos personales.
"""

import logging

from services.base_service import BaseService
from repositories.person_repository import PersonRepository
from core.mapping import Mapper
from core.exceptions import ValidationException
from database.models import Person
from models.persons import PersonDto, PersonUpdateDto

logger = logging.getLogger(__name__)


class PersonService(BaseService[PersonDto, Person]):
    """Service for managing person business logic."""

    def __init__(self, repository: PersonRepository, mapper: Mapper):
        """
        Initialize person service.

        Args:
            repository: PersonRepository instance
            mapper: Traductor DTO <-> entidad
        """
        super().__init__(repository, mapper, PersonDto)
        self.person_repository = repository

    def add_from_create_dto(self, dto: PersonDto) -> PersonDto:
        """
        Registra una persona validando que el documento no exista.

        Args:
            dto: Datos de la persona

        Returns:
            La persona creada

        Raises:
            ValidationException: Si ya hay una persona (no eliminada) con ese documento
        """
        existing = self.person_repository.get_by_document(dto.number_identification)
        if existing is not None:
            raise ValidationException(
                "El número de documento ya está registrado.",
                field="number_identification",
            )

        return self.add(dto)

    def patch_person(self, dto: PersonUpdateDto) -> bool:
        """Actualiza los datos personales; False si no existe o no se pudo guardar."""
        return self.person_repository.patch_person(dto)
