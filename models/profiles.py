"""
Perfiles de mapeo: todas las conversiones DTO <-> entidad de la aplicación.

Las vistas de actualización se declaran con ``skip_none=True``; las de
creación y lectura copian todos los campos.
"""

from core.mapping import Mapper
from database.models import Person, User, Rol, Module, Form, Permission
from models.persons import PersonDto, PersonUpdateDto
from models.roles import RolDto, RolUpdateDto
from models.modules import ModuleDto, ModuleUpdateDto
from models.forms import FormDto, FormUpdateDto
from models.permissions import PermissionDto, PermissionUpdateDto
from models.users import UserDto, UserCreateDto, UserUpdateDto


def build_mapper() -> Mapper:
    """Construye el mapper con todos los perfiles declarados."""
    mapper = Mapper()

    # Personas
    mapper.create_map(Person, PersonDto)
    mapper.create_map(PersonDto, Person)
    mapper.create_map(Person, PersonUpdateDto)
    mapper.create_map(PersonUpdateDto, Person, skip_none=True)
    mapper.create_map(PersonUpdateDto, PersonDto)

    # Roles
    mapper.create_map(Rol, RolDto)
    mapper.create_map(RolDto, Rol)
    mapper.create_map(RolUpdateDto, Rol, skip_none=True)

    # Módulos
    mapper.create_map(Module, ModuleDto)
    mapper.create_map(ModuleDto, Module)
    mapper.create_map(ModuleUpdateDto, Module, skip_none=True)

    # Formularios
    mapper.create_map(Form, FormDto)
    mapper.create_map(FormDto, Form)
    mapper.create_map(FormUpdateDto, Form, skip_none=True)

    # Permisos
    mapper.create_map(Permission, PermissionDto)
    mapper.create_map(PermissionDto, Permission)
    mapper.create_map(PermissionUpdateDto, Permission, skip_none=True)

    # Usuarios (la contraseña no es columna; el servicio la convierte en salt + hash)
    mapper.create_map(User, UserDto)
    mapper.create_map(UserCreateDto, User)
    mapper.create_map(UserUpdateDto, User, skip_none=True)

    return mapper


mapper = build_mapper()


def get_mapper() -> Mapper:
    """Retorna el mapper global (útil para dependency injection)."""
    return mapper
