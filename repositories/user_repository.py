"""
Repositorio para la entidad User.
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import User
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repositorio para la gestión de usuarios."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def exists_username(
        self,
        username: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        """
        Verifica si un username ya existe.

        Args:
            username: Username a verificar
            exclude_id: ID de usuario a excluir (para actualizaciones)

        Returns:
            True si el username existe, False en caso contrario
        """
        try:
            query = self.db.query(User).filter(User.username == username)

            if exclude_id is not None:
                query = query.filter(User.id != exclude_id)

            return query.first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Error checking username existence: {e}")
            self.db.rollback()
            raise
