from .persons import router as persons_router
from .users import router as users_router
from .roles import router as roles_router
from .modules import router as modules_router
from .forms import router as forms_router
from .permissions import router as permissions_router

__all__ = [
    "persons_router",
    "users_router",
    "roles_router",
    "modules_router",
    "forms_router",
    "permissions_router",
]
