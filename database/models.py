from datetime import datetime

from sqlalchemy import Column, String, Integer, BigInteger, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


# ==================== Capacidades ====================
# Las entidades declaran sus capacidades heredando de estos mixins;
# repositorios y servicios las consultan con isinstance.

class ActivableMixin:
    """Capacidad: habilitar/deshabilitar lógicamente la entidad (independiente del soft delete)."""
    active = Column(Boolean, nullable=False, default=True)


class CreationTimestampMixin:
    """Capacidad: fecha de creación asignada por la capa de servicio al crear."""
    create_date = Column(DateTime, nullable=False)

    def stamp_creation(self, now: datetime) -> None:
        self.create_date = now


class SoftDeleteMixin:
    """Capacidad: marca de eliminación lógica (None = vivo)."""
    update_date = Column(DateTime, nullable=True)
    delete_date = Column(DateTime, nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.delete_date is not None


#ORM: Personas
class Person(CreationTimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "persons"
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    second_name = Column(String(100), nullable=True)
    first_last_name = Column(String(100), nullable=False)
    second_last_name = Column(String(100), nullable=True)
    phone_number = Column(String(20), nullable=True)
    # documento: único entre personas no eliminadas (validado en el servicio)
    number_identification = Column(BigInteger, nullable=False, index=True)
    email = Column(String(150), nullable=True)

    users = relationship("User", back_populates="person")


#ORM: Usuarios
class User(ActivableMixin, Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True)
    email = Column(String(150), nullable=True)
    password_salt = Column(String(64), nullable=False)
    password_hash = Column(String(128), nullable=False)
    person_id = Column(Integer, ForeignKey("persons.id"), nullable=False)

    person = relationship("Person", back_populates="users")
    user_roles = relationship("UserRol", back_populates="user", cascade="all, delete-orphan")


#ORM: Roles
class Rol(ActivableMixin, Base):
    __tablename__ = "roles"
    id = Column(Integer, primary_key=True, autoincrement=True)
    type_rol = Column(String(50), nullable=False)
    description = Column(String(250), nullable=True)

    user_roles = relationship("UserRol", back_populates="rol", cascade="all, delete-orphan")
    rol_form_permissions = relationship(
        "RolFormPermission", back_populates="rol", cascade="all, delete-orphan"
    )


#ORM: Módulos
class Module(ActivableMixin, CreationTimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "modules"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(250), nullable=True)

    form_modules = relationship("FormModule", back_populates="module", cascade="all, delete-orphan")


#ORM: Formularios
class Form(ActivableMixin, CreationTimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "forms"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(250), nullable=True)

    form_modules = relationship("FormModule", back_populates="form", cascade="all, delete-orphan")
    rol_form_permissions = relationship(
        "RolFormPermission", back_populates="form", cascade="all, delete-orphan"
    )


#ORM: Permisos
class Permission(Base):
    __tablename__ = "permissions"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    display_name = Column(String(150), nullable=True)

    rol_form_permissions = relationship(
        "RolFormPermission", back_populates="permission", cascade="all, delete-orphan"
    )


#ORM: tablas de relación
class UserRol(Base):
    __tablename__ = "user_roles"
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    rol_id = Column(Integer, ForeignKey("roles.id"), nullable=False)

    user = relationship("User", back_populates="user_roles")
    rol = relationship("Rol", back_populates="user_roles")


class FormModule(Base):
    __tablename__ = "form_modules"
    id = Column(Integer, primary_key=True, autoincrement=True)
    form_id = Column(Integer, ForeignKey("forms.id"), nullable=False)
    module_id = Column(Integer, ForeignKey("modules.id"), nullable=False)

    form = relationship("Form", back_populates="form_modules")
    module = relationship("Module", back_populates="form_modules")


class RolFormPermission(Base):
    __tablename__ = "rol_form_permissions"
    id = Column(Integer, primary_key=True, autoincrement=True)
    rol_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    form_id = Column(Integer, ForeignKey("forms.id"), nullable=False)
    permission_id = Column(Integer, ForeignKey("permissions.id"), nullable=False)

    rol = relationship("Rol", back_populates="rol_form_permissions")
    form = relationship("Form", back_populates="rol_form_permissions")
    permission = relationship("Permission", back_populates="rol_form_permissions")


__all__ = [
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
