"""
Repositorio para la entidad Rol.
Agrega al CRUD genérico la consulta de roles asignados a un usuario.
"""

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import Rol, UserRol, User
import logging

logger = logging.getLogger(__name__)


class RolRepository(BaseRepository[Rol]):
    """Repositorio para la gestión de roles."""

    def __init__(self, db: Session):
        super().__init__(db, Rol)

    def user_exists(self, user_id: int) -> bool:
        try:
            return self.db.get(User, user_id) is not None
        except SQLAlchemyError as e:
            logger.error(f"Error getting user {user_id}: {e}")
            self.db.rollback()
            raise

    def get_by_user(self, user_id: int) -> List[Rol]:
        """
        Obtiene los roles asignados a un usuario, ordenados por ID.

        Args:
            user_id: ID del usuario

        Returns:
            Lista de roles (vacía si no tiene asignaciones)
        """
        try:
            return (
                self.db.query(Rol)
                .join(UserRol, UserRol.rol_id == Rol.id)
                .filter(UserRol.user_id == user_id)
                .order_by(Rol.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error getting roles for user {user_id}: {e}")
            self.db.rollback()
            raise
