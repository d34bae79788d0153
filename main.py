from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
import uvicorn
import logging

from config import Settings, settings, configure_logging, get_settings

from routes import (
    persons_router,
    users_router,
    roles_router,
    modules_router,
    forms_router,
    permissions_router,
)
from models.common import HealthCheckResponse
from database.db import create_tables, engine, get_database_url

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    try:
        create_tables()
        logger.info(f"Base de datos: {get_database_url()}")
    except Exception as e:
        logger.warning(f"No se pudieron crear tablas en la base de datos: {e}")
    yield
    # Shutdown

app = FastAPI(
    title=settings.app_name,
    description="Gestión de personas, usuarios, roles, módulos, formularios y permisos.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root(app_settings: Settings = Depends(get_settings)):
    """Endpoint raíz con información de la API."""
    return {
        "message": app_settings.app_name,
        "version": app_settings.app_version,
        "status": "active",
        "environment": "production" if app_settings.is_production else "development",
        "docs": "/docs",
        "redoc": "/redoc"
    }

app.include_router(persons_router)
app.include_router(users_router)
app.include_router(roles_router)
app.include_router(modules_router)
app.include_router(forms_router)
app.include_router(permissions_router)

@app.get("/health", response_model=HealthCheckResponse)
def health_check():
    """Health check endpoint con verificación de base de datos."""
    db_status = "unknown"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Health check: Error de conexión a BD: {e}")
        db_status = "disconnected"

    return HealthCheckResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        environment="production" if settings.is_production else "development",
    )

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
