"""
Repositorio para la entidad Person.
Agrega al CRUD genérico la búsqueda por documento y la actualización parcial.
Ambas consultas ignoran las personas eliminadas lógicamente.
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import Person
from models.persons import PersonUpdateDto
import logging

logger = logging.getLogger(__name__)

# campos que sobrescribe patch_person, siempre, aunque vengan en None
PATCHABLE_FIELDS = (
    "first_name",
    "second_name",
    "first_last_name",
    "second_last_name",
    "phone_number",
    "number_identification",
)


class PersonRepository(BaseRepository[Person]):
    """Repositorio para la gestión de personas."""

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de personas.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, Person)

    def _alive(self):
        return self.db.query(Person).filter(Person.delete_date.is_(None))

    def get_by_document(self, number_identification: int) -> Optional[Person]:
        """
        Busca una persona no eliminada por número de documento.

        Args:
            number_identification: Número de documento

        Returns:
            Person instance or None si no se encuentra
        """
        try:
            return self._alive().filter(
                Person.number_identification == number_identification
            ).first()
        except SQLAlchemyError as e:
            logger.error(f"Error finding person by document {number_identification}: {e}")
            self.db.rollback()
            raise

    def patch_person(self, dto: PersonUpdateDto) -> bool:
        """
        Sobrescribe los datos personales de una persona no eliminada.

        Copia exactamente los campos de ``PATCHABLE_FIELDS`` desde el DTO,
        incluidos los valores None; el resto de columnas no se toca.

        Args:
            dto: Datos de actualización (con el ID de la persona)

        Returns:
            True si se guardó; False si no existe, está eliminada o la base de datos falló
        """
        try:
            person = self._alive().filter(Person.id == dto.id).first()
            if person is None:
                return False

            for field in PATCHABLE_FIELDS:
                setattr(person, field, getattr(dto, field))

            self.db.commit()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Error al actualizar parcialmente la persona {dto.id}: {e}")
            self.db.rollback()
            return False
