""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- El traductor DTO <-> entidad
"""

from .exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    MappingException,
)
from .mapping import Mapper, MapBinding

__all__ = [
    # Excepciones
    "AppException",
    "NotFoundException",
    "ValidationException",
    "MappingException",
    # mapeo
    "Mapper",
    "MapBinding",
]
