from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    get_database_url,
    hash_password,
    verify_password,
)
from .models import (
    Base,
    ActivableMixin,
    CreationTimestampMixin,
    SoftDeleteMixin,
    Person,
    User,
    Rol,
    Module,
    Form,
    Permission,
    UserRol,
    FormModule,
    RolFormPermission,
)

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "get_database_url",
    "hash_password",
    "verify_password",
    "Base",
    "ActivableMixin",
    "CreationTimestampMixin",
    "SoftDeleteMixin",
    "Person",
    "User",
    "Rol",
    "Module",
    "Form",
    "Permission",
    "UserRol",
    "FormModule",
    "RolFormPermission",
]
