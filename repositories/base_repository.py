"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se reutilizan en todos los repositorios de entidades.

Cada operación de escritura hace commit de su propia unidad de trabajo
antes de retornar. Los errores de persistencia se propagan sin modificar
(después de hacer rollback), excepto en ``set_active``, que los registra
y retorna False.
"""

from typing import TypeVar, Generic, List, Optional, Type
import logging

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import NotFoundException
from database.models import ActivableMixin

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico que proporciona operaciones CRUD estándar

    Esta clase puede usarse directamente para entidades sin reglas propias
    o heredarse por repositorios de entidades específicos.
    """

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy del request actual
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    @property
    def entity_name(self) -> str:
        return self.model_class.__name__

    def get_all(self) -> List[T]:
        """
        Obtiene todas las entidades, ordenadas por su clave primaria.

        No filtra registros (ni eliminados lógicamente ni inactivos).

        Returns:
            List of entities
        """
        try:
            primary_key = sa_inspect(self.model_class).primary_key
            return self.db.query(self.model_class).order_by(*primary_key).all()
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.entity_name}: {e}")
            self.db.rollback()
            raise

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad

        Returns:
            The entity or None if not found
        """
        try:
            return self.db.get(self.model_class, id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.entity_name} by id {id}: {e}")
            self.db.rollback()
            raise

    def count(self) -> int:
        """Cuenta todas las filas de la entidad."""
        try:
            return self.db.query(self.model_class).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.entity_name}: {e}")
            self.db.rollback()
            raise

    def create(self, entity: T) -> T:
        """
        Crea una nueva entidad y confirma la transacción.

        Args:
            entity: La entidad a crear

        Returns:
            La entidad creada, con el ID asignado por la base de datos
        """
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.entity_name}: {e}")
            self.db.rollback()
            raise

    def update(self, entity: T) -> T:
        """
        Actualiza una entidad existente y confirma la transacción.

        Solo se copian los atributos presentes en la instancia recibida;
        los demás conservan el valor almacenado.

        Args:
            entity: Entidad con el ID de una fila existente

        Returns:
            La entidad persistida tras la actualización

        Raises:
            NotFoundException: Si no existe una fila con ese ID
        """
        identity = sa_inspect(self.model_class).primary_key_from_instance(entity)
        if any(value is None for value in identity):
            raise NotFoundException(resource=self.entity_name)

        key = identity[0] if len(identity) == 1 else tuple(identity)
        if self.get_by_id(key) is None:
            raise NotFoundException(resource=self.entity_name, identifier=str(key))

        try:
            merged = self.db.merge(entity)
            self.db.commit()
            self.db.refresh(merged)
            return merged
        except SQLAlchemyError as e:
            logger.error(f"Error updating {self.entity_name} {key}: {e}")
            self.db.rollback()
            raise

    def delete(self, id: int) -> None:
        """
        Elimina físicamente una entidad por su ID.

        Si no existe, no hace nada.

        Args:
            id: ID de la entidad
        """
        entity = self.get_by_id(id)
        if entity is None:
            logger.debug(f"{self.entity_name} {id} no existe; nada que eliminar")
            return

        try:
            self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.entity_name} {id}: {e}")
            self.db.rollback()
            raise

    def set_active(self, id: int, active: bool) -> bool:
        """
        Cambia el estado activo de una entidad activable.

        Args:
            id: ID de la entidad
            active: Nuevo estado

        Returns:
            True si se guardó el cambio; False si la entidad no existe,
            no es activable o la base de datos falló
        """
        try:
            entity = self.db.get(self.model_class, id)
            if not isinstance(entity, ActivableMixin):
                return False

            entity.active = active
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error al cambiar estado activo de {self.entity_name} {id}: {e}")
            self.db.rollback()
            return False
