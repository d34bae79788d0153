from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from models.common import ActiveDto


class PersonDto(BaseModel):
    """Vista completa de una persona; también se usa para registrarla.

    ``create_date`` es de solo lectura: el servicio la asigna al crear
    e ignora cualquier valor enviado por el cliente.
    """
    id: Optional[int] = None
    first_name: str = Field(..., min_length=1, max_length=100)
    second_name: Optional[str] = Field(None, max_length=100)
    first_last_name: str = Field(..., min_length=1, max_length=100)
    second_last_name: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=20)
    number_identification: int = Field(..., ge=1, description="Número de documento")
    email: Optional[str] = Field(None, max_length=150)
    create_date: Optional[datetime] = None


class PersonUpdateDto(BaseModel):
    """Vista de actualización: los campos None no se copian en el PUT genérico."""
    id: int = Field(..., ge=1)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    second_name: Optional[str] = Field(None, max_length=100)
    first_last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    second_last_name: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=20)
    number_identification: Optional[int] = Field(None, ge=1)
    email: Optional[str] = Field(None, max_length=150)


class PersonStatusDto(ActiveDto):
    pass
