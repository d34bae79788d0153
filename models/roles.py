from pydantic import BaseModel, Field
from typing import Optional

from models.common import ActiveDto


class RolDto(BaseModel):
    id: Optional[int] = None
    type_rol: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=250)
    active: bool = True


class RolUpdateDto(BaseModel):
    id: int = Field(..., ge=1)
    type_rol: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=250)
    active: Optional[bool] = None


class RolStatusDto(ActiveDto):
    pass
