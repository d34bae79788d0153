"""
Modelos comunes para la API.

Incluye el DTO de capacidad de activación y las respuestas estándar
para todos los endpoints.
"""
from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime

from utils.datetime_utils import get_local_now


class ActiveDto(BaseModel):
    """DTO de capacidad: identificador y estado activo deseado."""
    id: int = Field(..., ge=1, description="ID de la entidad")
    active: bool = Field(..., description="Estado activo deseado")


class SuccessResponse(BaseModel):
    """Respuesta estándar exitosa."""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    message: str = Field(..., description="Mensaje descriptivo de la operación")
    data: Optional[Any] = Field(None, description="Datos de respuesta")
    timestamp: datetime = Field(default_factory=get_local_now, description="Timestamp de la respuesta")


class HealthCheckResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general (healthy/unhealthy)")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
    database: str = Field(..., description="Estado de la base de datos")
    environment: str = Field(..., description="Entorno (production/development)")
    timestamp: datetime = Field(default_factory=get_local_now)


def create_success_response(message: str, data: Any = None) -> dict:
    """Helper para crear respuestas exitosas."""
    return SuccessResponse(message=message, data=data).model_dump()
