"""
Tests for UserService.
"""

import pytest
from sqlalchemy.orm import Session

from database.db import verify_password
from database.models import User, Person
from repositories.user_repository import UserRepository
from services.user_service import UserService
from core.mapping import Mapper
from models.users import UserDto, UserCreateDto, UserUpdateDto, UserStatusDto
from core.exceptions import ValidationException


@pytest.fixture
def user_service(db_session: Session, mapper: Mapper) -> UserService:
    return UserService(UserRepository(db_session), mapper)


@pytest.fixture
def user_data(person_instance: Person) -> dict:
    return {
        "username": "ana.gomez",
        "email": "ana@example.com",
        "password": "secreto123",
        "person_id": person_instance.id,
    }


class TestUserService:
    """Tests for user registration and the generic operations on users."""

    def test_add_hashes_password(self, user_service: UserService, user_data: dict, db_session: Session):
        created = user_service.add_from_create_dto(UserCreateDto(**user_data))

        assert isinstance(created, UserDto)
        assert "password" not in created.model_dump()

        stored = db_session.get(User, created.id)
        assert stored.password_hash != "secreto123"
        assert verify_password(stored.password_salt, stored.password_hash, "secreto123")
        assert not verify_password(stored.password_salt, stored.password_hash, "otra-clave")

    def test_update_keeps_credentials(self, user_service: UserService, user_data: dict, db_session: Session):
        created = user_service.add_from_create_dto(UserCreateDto(**user_data))
        stored_hash = db_session.get(User, created.id).password_hash

        updated = user_service.update(UserUpdateDto(id=created.id, email="nuevo@example.com"))

        assert updated.email == "nuevo@example.com"
        assert updated.username == "ana.gomez"
        assert db_session.get(User, created.id).password_hash == stored_hash

    def test_set_active(self, user_service: UserService, user_data: dict):
        created = user_service.add_from_create_dto(UserCreateDto(**user_data))

        assert user_service.set_active(UserStatusDto(id=created.id, active=False)) is True
        assert user_service.get_by_id(created.id).active is False

    def test_add_duplicate_username_raises_without_writing(
        self,
        user_service: UserService,
        user_instance: User,
        user_data: dict,
        db_session: Session
    ):
        with pytest.raises(ValidationException) as exc_info:
            user_service.add_from_create_dto(UserCreateDto(**{**user_data, "email": "otra@example.com"}))

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"field": "username"}
        assert db_session.query(User).count() == 1

    def test_update_to_taken_username_raises(
        self,
        user_service: UserService,
        user_instance: User,
        user_data: dict
    ):
        other = user_service.add_from_create_dto(UserCreateDto(**{**user_data, "username": "luis"}))

        with pytest.raises(ValidationException):
            user_service.update(UserUpdateDto(id=other.id, username="ana.gomez"))

        assert user_service.get_by_id(other.id).username == "luis"

    def test_update_keeping_own_username(self, user_service: UserService, user_instance: User):
        updated = user_service.update(UserUpdateDto(id=user_instance.id, username="ana.gomez", active=False))

        assert updated.active is False
