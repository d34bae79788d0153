"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any
from datetime import datetime
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from main import app
from database.db import get_db
from database.models import Base, Person, Rol, Module, Form, Permission, User, UserRol
from database.db import hash_password
from models.profiles import build_mapper
from core.mapping import Mapper


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def mapper() -> Mapper:
    """Mapper with every declared profile."""
    return build_mapper()


# ==================== Person Fixtures ====================

@pytest.fixture
def person_data() -> Dict[str, Any]:
    """Sample person data for testing."""
    return {
        "first_name": "Ana",
        "second_name": "María",
        "first_last_name": "Gómez",
        "second_last_name": "Ruiz",
        "phone_number": "3001234567",
        "number_identification": 123,
        "email": "ana@example.com",
    }


@pytest.fixture
def person_instance(db_session: Session, person_data: Dict[str, Any]) -> Person:
    """Create a person in the database."""
    person = Person(**person_data, create_date=datetime(2024, 1, 15, 8, 30))
    db_session.add(person)
    db_session.commit()
    db_session.refresh(person)
    return person


@pytest.fixture
def deleted_person(db_session: Session) -> Person:
    """Create a soft-deleted person in the database."""
    person = Person(
        first_name="Luis",
        first_last_name="Pérez",
        phone_number="3009999999",
        number_identification=456,
        create_date=datetime(2024, 1, 1),
        delete_date=datetime(2024, 2, 1),
    )
    db_session.add(person)
    db_session.commit()
    db_session.refresh(person)
    return person


# ==================== Catalog Fixtures ====================

@pytest.fixture
def rol_instance(db_session: Session) -> Rol:
    """Create an active rol in the database."""
    rol = Rol(type_rol="Administrador", description="Acceso total", active=True)
    db_session.add(rol)
    db_session.commit()
    db_session.refresh(rol)
    return rol


@pytest.fixture
def module_instance(db_session: Session) -> Module:
    """Create an active module in the database."""
    module = Module(
        name="Seguridad",
        description="Gestión de accesos",
        active=True,
        create_date=datetime(2024, 3, 1),
    )
    db_session.add(module)
    db_session.commit()
    db_session.refresh(module)
    return module


@pytest.fixture
def permission_instance(db_session: Session) -> Permission:
    """Create a permission (not activable) in the database."""
    permission = Permission(name="read", display_name="Leer")
    db_session.add(permission)
    db_session.commit()
    db_session.refresh(permission)
    return permission


@pytest.fixture
def form_instance(db_session: Session) -> Form:
    """Create an active form in the database."""
    form = Form(
        name="Usuarios",
        description="Administración de usuarios",
        active=True,
        create_date=datetime(2024, 3, 2),
    )
    db_session.add(form)
    db_session.commit()
    db_session.refresh(form)
    return form


# ==================== User Fixtures ====================

@pytest.fixture
def user_instance(db_session: Session, person_instance: Person) -> User:
    """Create a user for person_instance."""
    salt, password_hash = hash_password("secreto123")
    user = User(
        username="ana.gomez",
        email="ana@example.com",
        password_salt=salt,
        password_hash=password_hash,
        active=True,
        person_id=person_instance.id,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def user_with_rol(db_session: Session, user_instance: User, rol_instance: Rol) -> User:
    """Assign rol_instance to user_instance."""
    db_session.add(UserRol(user_id=user_instance.id, rol_id=rol_instance.id))
    db_session.commit()
    return user_instance
