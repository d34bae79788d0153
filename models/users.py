from pydantic import BaseModel, Field
from typing import Optional

from models.common import ActiveDto


class UserDto(BaseModel):
    """Vista de lectura de un usuario (nunca expone credenciales)."""
    id: Optional[int] = None
    username: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=150)
    active: bool = True
    person_id: int = Field(..., ge=1)


class UserCreateDto(BaseModel):
    """Modelo para registrar usuarios. La contraseña se guarda como salt + hash."""
    username: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=150)
    password: str = Field(..., min_length=6)
    active: bool = True
    person_id: int = Field(..., ge=1)


class UserUpdateDto(BaseModel):
    id: int = Field(..., ge=1)
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=150)
    active: Optional[bool] = None
    person_id: Optional[int] = Field(None, ge=1)


class UserStatusDto(ActiveDto):
    pass
