"""
Capa de servicio para la lógica de negocio.
Este paquete contiene clases de servicio que implementan la lógica de negocio
y orquestan las operaciones de los repositorios.
"""

from .base_service import BaseService
from .person_service import PersonService
from .user_service import UserService
from .rol_service import RolService

__all__ = [
    "BaseService",
    "PersonService",
    "UserService",
    "RolService",
]
