"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting services
and repositories into route handlers. Every dependency receives the
session of the current request; nothing is shared between requests.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from database.db import get_db
from database.models import Module, Form, Permission
from core.mapping import Mapper
from models.profiles import get_mapper
from models.modules import ModuleDto
from models.forms import FormDto
from models.permissions import PermissionDto
from repositories.base_repository import BaseRepository
from repositories.person_repository import PersonRepository
from repositories.user_repository import UserRepository
from repositories.rol_repository import RolRepository
from services.base_service import BaseService
from services.person_service import PersonService
from services.user_service import UserService
from services.rol_service import RolService


# ==================== Repository Dependencies ====================

def get_person_repository(db: Session = Depends(get_db)) -> PersonRepository:
    """
    Get PersonRepository instance.

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        PersonRepository instance
    """
    return PersonRepository(db)


# ==================== Service Dependencies ====================

def get_person_service(
    repository: PersonRepository = Depends(get_person_repository),
    mapper: Mapper = Depends(get_mapper),
) -> PersonService:
    """
    Get PersonService instance.

    This is the main dependency to use in route handlers for person operations.

    Example:
        ```python
        @router.get("/persons")
        def get_persons(
            service: PersonService = Depends(get_person_service)
        ):
            return service.get_all()
        ```
    """
    return PersonService(repository, mapper)


def get_user_service(
    db: Session = Depends(get_db),
    mapper: Mapper = Depends(get_mapper),
) -> UserService:
    """Get UserService instance."""
    return UserService(UserRepository(db), mapper)


def get_rol_service(
    db: Session = Depends(get_db),
    mapper: Mapper = Depends(get_mapper),
) -> RolService:
    """Get RolService instance."""
    return RolService(RolRepository(db), mapper)


def get_module_service(
    db: Session = Depends(get_db),
    mapper: Mapper = Depends(get_mapper),
) -> BaseService[ModuleDto, Module]:
    """Get the generic service for modules."""
    return BaseService(BaseRepository(db, Module), mapper, ModuleDto)


def get_form_service(
    db: Session = Depends(get_db),
    mapper: Mapper = Depends(get_mapper),
) -> BaseService[FormDto, Form]:
    """Get the generic service for forms."""
    return BaseService(BaseRepository(db, Form), mapper, FormDto)


def get_permission_service(
    db: Session = Depends(get_db),
    mapper: Mapper = Depends(get_mapper),
) -> BaseService[PermissionDto, Permission]:
    """Get the generic service for permissions."""
    return BaseService(BaseRepository(db, Permission), mapper, PermissionDto)
