from pydantic import BaseModel, Field
from typing import Optional


class PermissionDto(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)
    display_name: Optional[str] = Field(None, max_length=150)


class PermissionUpdateDto(BaseModel):
    id: int = Field(..., ge=1)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    display_name: Optional[str] = Field(None, max_length=150)
