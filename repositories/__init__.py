"""
Capa de repositorio para el acceso a datos.
Este paquete contiene clases de repositorio que gestionan todas las operaciones de la base de datos.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .base_repository import BaseRepository
from .person_repository import PersonRepository
from .user_repository import UserRepository
from .rol_repository import RolRepository

__all__ = [
    "BaseRepository",
    "PersonRepository",
    "UserRepository",
    "RolRepository",
]
