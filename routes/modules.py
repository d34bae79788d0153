"""
Module routes - CRUD genérico más activación lógica.
"""

from routes.common import build_crud_router
from dependencies import get_module_service
from models.modules import ModuleDto, ModuleUpdateDto, ModuleStatusDto

router = build_crud_router(
    prefix="/modules",
    resource="Módulo",
    get_service=get_module_service,
    dto_class=ModuleDto,
    update_dto_class=ModuleUpdateDto,
    status_dto_class=ModuleStatusDto,
)
