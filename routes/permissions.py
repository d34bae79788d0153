"""
Permission routes - CRUD genérico (los permisos no son activables).
"""

from routes.common import build_crud_router
from dependencies import get_permission_service
from models.permissions import PermissionDto, PermissionUpdateDto

router = build_crud_router(
    prefix="/permissions",
    resource="Permiso",
    get_service=get_permission_service,
    dto_class=PermissionDto,
    update_dto_class=PermissionUpdateDto,
)
