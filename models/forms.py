from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from models.common import ActiveDto


class FormDto(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=250)
    active: bool = True
    create_date: Optional[datetime] = None


class FormUpdateDto(BaseModel):
    id: int = Field(..., ge=1)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=250)
    active: Optional[bool] = None


class FormStatusDto(ActiveDto):
    pass
