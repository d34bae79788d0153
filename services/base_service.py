"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase traduce DTOs <-> entidades con el mapper y delega la
persistencia en el repositorio de la entidad.
"""

from typing import TypeVar, Generic, List, Optional, Type
import logging

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

from repositories.base_repository import BaseRepository
from core.mapping import Mapper
from database.models import CreationTimestampMixin
from models.common import ActiveDto
from utils.datetime_utils import get_local_naive_now

logger = logging.getLogger(__name__)

# Type variables
TDto = TypeVar('TDto', bound=BaseModel)  # DTO de lectura
TEntity = TypeVar('TEntity')  # ORM Model


class BaseService(Generic[TDto, TEntity]):
    """
    Servicio base que proporciona operaciones CRUD y de activación.
    Puede usarse directamente o heredarse por servicios de entidades específicas.
    """

    def __init__(
        self,
        repository: BaseRepository[TEntity],
        mapper: Mapper,
        dto_class: Type[TDto],
    ):
        """
        Inicializa el servicio.

        Args:
            repository: The repository instance for data access
            mapper: Traductor DTO <-> entidad
            dto_class: DTO devuelto por las operaciones de lectura
        """
        self.repository = repository
        self.mapper = mapper
        self.dto_class = dto_class

    @property
    def entity_class(self) -> Type[TEntity]:
        return self.repository.model_class

    def get_all(self) -> List[TDto]:
        """Obtiene todas las entidades como DTOs."""
        return self.mapper.map_many(self.repository.get_all(), self.dto_class)

    def get_by_id(self, id: int) -> Optional[TDto]:
        """
        Obtiene una entidad por su ID.

        Returns:
            The DTO or None if not found
        """
        return self.mapper.map(self.repository.get_by_id(id), self.dto_class)

    def add(self, dto: BaseModel) -> TDto:
        """
        Crea una entidad a partir de un DTO.

        El ID lo asigna la base de datos. Si la entidad tiene fecha de creación,
        se asigna aquí, ignorando cualquier valor enviado en el DTO.

        Args:
            dto: DTO de creación

        Returns:
            La entidad creada como DTO
        """
        entity = self._to_new_entity(dto)
        created = self.repository.create(entity)
        logger.info(f"{self.entity_class.__name__} {self._identity(created)} creado")
        return self.mapper.map(created, self.dto_class)

    def update(self, dto: BaseModel) -> TDto:
        """
        Actualiza una entidad a partir de un DTO que incluye su ID.

        El binding declarado para el tipo del DTO decide si los campos None
        se copian o se omiten. La fecha de creación nunca se toma del DTO:
        se conserva la almacenada.

        Raises:
            NotFoundException: Si la entidad no existe
        """
        entity = self.mapper.map(dto, self.entity_class)
        if isinstance(entity, CreationTimestampMixin):
            # merge solo copia los atributos presentes en la instancia
            sa_inspect(entity).dict.pop("create_date", None)
        updated = self.repository.update(entity)
        logger.info(f"{self.entity_class.__name__} {self._identity(updated)} actualizado")
        return self.mapper.map(updated, self.dto_class)

    def delete(self, id: int) -> None:
        """
        Elimina físicamente una entidad. Si no existe, no hace nada.
        """
        if self.repository.get_by_id(id) is None:
            logger.info(f"{self.entity_class.__name__} {id} no encontrado al eliminar")
        self.repository.delete(id)

    def set_active(self, dto: ActiveDto) -> bool:
        """
        Cambia el estado activo de la entidad indicada en el DTO.

        Returns:
            False si la entidad no existe, no es activable o no se pudo guardar
        """
        return self.repository.set_active(dto.id, dto.active)

    def _to_new_entity(self, dto: BaseModel) -> TEntity:
        """Traduce un DTO de creación a una entidad lista para insertar."""
        entity = self.mapper.map(dto, self.entity_class)

        mapper = sa_inspect(self.entity_class)
        for column in mapper.primary_key:
            setattr(entity, mapper.get_property_by_column(column).key, None)

        if isinstance(entity, CreationTimestampMixin):
            entity.stamp_creation(get_local_naive_now())
        return entity

    def _identity(self, entity: TEntity):
        identity = sa_inspect(self.entity_class).primary_key_from_instance(entity)
        return identity[0] if len(identity) == 1 else tuple(identity)
