from .common import (
    ActiveDto,
    SuccessResponse,
    HealthCheckResponse,
    create_success_response,
)
from .persons import PersonDto, PersonUpdateDto, PersonStatusDto
from .roles import RolDto, RolUpdateDto, RolStatusDto
from .modules import ModuleDto, ModuleUpdateDto, ModuleStatusDto
from .forms import FormDto, FormUpdateDto, FormStatusDto
from .permissions import PermissionDto, PermissionUpdateDto
from .users import UserDto, UserCreateDto, UserUpdateDto, UserStatusDto

__all__ = [
    # Common
    "ActiveDto", "SuccessResponse", "HealthCheckResponse", "create_success_response",
    # Personas
    "PersonDto", "PersonUpdateDto", "PersonStatusDto",
    # Roles
    "RolDto", "RolUpdateDto", "RolStatusDto",
    # Módulos
    "ModuleDto", "ModuleUpdateDto", "ModuleStatusDto",
    # Formularios
    "FormDto", "FormUpdateDto", "FormStatusDto",
    # Permisos
    "PermissionDto", "PermissionUpdateDto",
    # Usuarios
    "UserDto", "UserCreateDto", "UserUpdateDto", "UserStatusDto",
]
