"""
Service for User business logic.
"""

import logging

from services.base_service import BaseService
from repositories.user_repository import UserRepository
from core.mapping import Mapper
from core.exceptions import ValidationException
from database.db import hash_password
from database.models import User
from models.users import UserDto, UserCreateDto, UserUpdateDto

logger = logging.getLogger(__name__)


class UserService(BaseService[UserDto, User]):
    """Service for managing user business logic."""

    def __init__(self, repository: UserRepository, mapper: Mapper):
        super().__init__(repository, mapper, UserDto)
        self.user_repository = repository

    def add_from_create_dto(self, dto: UserCreateDto) -> UserDto:
        """
        Registra un usuario guardando su contraseña como salt + hash.

        Args:
            dto: Datos del usuario, con la contraseña en claro

        Returns:
            El usuario creado (sin credenciales)

        Raises:
            ValidationException: Si el username ya está registrado
        """
        if self.user_repository.exists_username(dto.username):
            raise ValidationException(
                "El nombre de usuario ya está registrado.",
                field="username",
            )

        entity = self._to_new_entity(dto)
        entity.password_salt, entity.password_hash = hash_password(dto.password)

        created = self.repository.create(entity)
        logger.info(f"User {created.id} creado ({created.username})")
        return self.mapper.map(created, self.dto_class)

    def update(self, dto: UserUpdateDto) -> UserDto:
        """
        Actualiza un usuario validando que el nuevo username no esté en uso.

        Raises:
            ValidationException: Si el username pertenece a otro usuario
            NotFoundException: Si el usuario no existe
        """
        if dto.username is not None and self.user_repository.exists_username(dto.username, exclude_id=dto.id):
            raise ValidationException(
                "El nombre de usuario ya está registrado.",
                field="username",
            )
        return super().update(dto)
