"""
Service for Rol business logic.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.rol_repository import RolRepository
from core.mapping import Mapper
from core.exceptions import NotFoundException
from database.models import Rol
from models.roles import RolDto

logger = logging.getLogger(__name__)


class RolService(BaseService[RolDto, Rol]):
    """Service for managing roles and their assignment to users."""

    def __init__(self, repository: RolRepository, mapper: Mapper):
        super().__init__(repository, mapper, RolDto)
        self.rol_repository = repository

    def get_by_user(self, user_id: int) -> List[RolDto]:
        """
        Roles asignados a un usuario.

        Raises:
            NotFoundException: Si el usuario no existe
        """
        if not self.rol_repository.user_exists(user_id):
            raise NotFoundException(resource="Usuario", identifier=str(user_id))
        return self.mapper.map_many(self.rol_repository.get_by_user(user_id), RolDto)
