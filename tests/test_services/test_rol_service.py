"""
Tests for RolService.
"""

import pytest
from sqlalchemy.orm import Session

from database.models import Rol, User
from repositories.rol_repository import RolRepository
from services.rol_service import RolService
from core.exceptions import NotFoundException
from core.mapping import Mapper
from models.roles import RolDto


@pytest.fixture
def rol_service(db_session: Session, mapper: Mapper) -> RolService:
    return RolService(RolRepository(db_session), mapper)


class TestRolServiceByUser:
    """Tests for get_by_user."""

    def test_get_by_user_returns_dtos(self, rol_service: RolService, user_with_rol: User):
        roles = rol_service.get_by_user(user_with_rol.id)

        assert len(roles) == 1
        assert isinstance(roles[0], RolDto)
        assert roles[0].type_rol == "Administrador"

    def test_get_by_user_without_roles(self, rol_service: RolService, user_instance: User):
        assert rol_service.get_by_user(user_instance.id) == []

    def test_get_by_missing_user_raises(self, rol_service: RolService):
        with pytest.raises(NotFoundException):
            rol_service.get_by_user(999)
