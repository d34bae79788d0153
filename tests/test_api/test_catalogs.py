"""
Tests for the generic CRUD endpoints (roles, modules, forms, permissions, users).
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from datetime import datetime

from config import Settings, get_settings
from main import app
from database.models import Rol, Module, Form, Permission, Person, User


class TestRoles:
    """Tests for /roles."""

    def test_crear_rol(self, client: TestClient):
        response = client.post("/roles/", json={"type_rol": "Auditor", "description": "Solo lectura"})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] is not None
        assert data["active"] is True

    def test_listar_roles(self, client: TestClient, rol_instance: Rol):
        response = client.get("/roles/")

        assert response.status_code == 200
        assert response.json()[0]["type_rol"] == "Administrador"

    def test_actualizar_rol_conserva_campos_omitidos(self, client: TestClient, rol_instance: Rol):
        response = client.put(f"/roles/{rol_instance.id}", json={"id": rol_instance.id, "type_rol": "Admin"})

        assert response.status_code == 200
        data = response.json()
        assert data["type_rol"] == "Admin"
        assert data["description"] == "Acceso total"

    def test_actualizar_rol_id_distinto(self, client: TestClient, rol_instance: Rol):
        response = client.put("/roles/5", json={"id": rol_instance.id, "type_rol": "Admin"})

        assert response.status_code == 400

    def test_cambiar_estado_rol(self, client: TestClient, rol_instance: Rol):
        response = client.patch("/roles/active", json={"id": rol_instance.id, "active": False})

        assert response.status_code == 200
        assert response.json()["data"] == {"id": rol_instance.id, "active": False}
        assert client.get(f"/roles/{rol_instance.id}").json()["active"] is False

    def test_cambiar_estado_rol_inexistente(self, client: TestClient):
        response = client.patch("/roles/active", json={"id": 999, "active": False})

        assert response.status_code == 404

    def test_cambiar_estado_id_invalido(self, client: TestClient):
        response = client.patch("/roles/active", json={"id": 0, "active": False})

        assert response.status_code == 422

    def test_eliminar_rol(self, client: TestClient, rol_instance: Rol, db_session: Session):
        response = client.delete(f"/roles/{rol_instance.id}")

        assert response.status_code == 200
        assert db_session.query(Rol).count() == 0

    def test_patch_rol(self, client: TestClient, rol_instance: Rol):
        response = client.patch(f"/roles/{rol_instance.id}", json={"id": rol_instance.id, "description": "Todo"})

        assert response.status_code == 200
        data = response.json()
        assert data["description"] == "Todo"
        assert data["type_rol"] == "Administrador"

    def test_patch_rol_id_distinto(self, client: TestClient, rol_instance: Rol):
        response = client.patch("/roles/42", json={"id": rol_instance.id, "description": "Todo"})

        assert response.status_code == 400

    def test_patch_rol_inexistente(self, client: TestClient):
        response = client.patch("/roles/999", json={"id": 999, "description": "Todo"})

        assert response.status_code == 404

    def test_roles_de_usuario(self, client: TestClient, user_with_rol: User, rol_instance: Rol):
        response = client.get(f"/roles/user/{user_with_rol.id}")

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [rol_instance.id]

    def test_roles_de_usuario_inexistente(self, client: TestClient):
        assert client.get("/roles/user/999").status_code == 404


class TestModules:
    """Tests for /modules."""

    def test_crear_modulo_asigna_fecha(self, client: TestClient):
        response = client.post("/modules/", json={"name": "Reportes", "create_date": "2000-01-01T00:00:00"})

        assert response.status_code == 201
        assert not response.json()["create_date"].startswith("2000")

    def test_obtener_modulo(self, client: TestClient, module_instance: Module):
        response = client.get(f"/modules/{module_instance.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Seguridad"

    def test_actualizar_modulo_conserva_fecha_creacion(self, client: TestClient, module_instance: Module):
        response = client.put(
            f"/modules/{module_instance.id}",
            json={"id": module_instance.id, "name": "Accesos"}
        )

        assert response.status_code == 200
        assert response.json()["create_date"].startswith("2024-03-01")


class TestForms:
    """Tests for /forms."""

    def test_patch_formulario(self, client: TestClient, form_instance: Form):
        response = client.patch("/forms/", json={"id": form_instance.id, "active": False})

        assert response.status_code == 200
        data = response.json()
        assert data["active"] is False
        assert data["name"] == "Usuarios"
        assert data["description"] == "Administración de usuarios"

    def test_patch_formulario_inexistente(self, client: TestClient):
        response = client.patch("/forms/", json={"id": 999, "name": "X"})

        assert response.status_code == 404


class TestPermissions:
    """Permissions are not activable: the router has no PATCH /active."""

    def test_crear_permiso(self, client: TestClient):
        response = client.post("/permissions/", json={"name": "write", "display_name": "Escribir"})

        assert response.status_code == 201

    def test_sin_endpoint_de_estado(self, client: TestClient, permission_instance: Permission):
        response = client.patch("/permissions/active", json={"id": permission_instance.id, "active": True})

        assert response.status_code in (404, 405)


class TestUsers:
    """Tests for /users."""

    def test_crear_usuario_no_expone_credenciales(self, client: TestClient, person_instance: Person):
        response = client.post("/users/", json={
            "username": "ana.gomez",
            "password": "secreto123",
            "person_id": person_instance.id,
        })

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "ana.gomez"
        assert "password" not in data
        assert "password_hash" not in data
        assert "password_salt" not in data

    def test_crear_usuario_password_corto(self, client: TestClient, person_instance: Person):
        response = client.post("/users/", json={
            "username": "ana",
            "password": "123",
            "person_id": person_instance.id,
        })

        assert response.status_code == 422

    def test_obtener_usuario_inexistente(self, client: TestClient):
        assert client.get("/users/999").status_code == 404

    def test_crear_usuario_duplicado(self, client: TestClient, person_instance: Person, db_session: Session):
        payload = {
            "username": "ana.gomez",
            "password": "secreto123",
            "person_id": person_instance.id,
        }

        assert client.post("/users/", json=payload).status_code == 201
        response = client.post("/users/", json=payload)

        assert response.status_code == 400
        assert "usuario" in response.json()["detail"]
        assert db_session.query(User).count() == 1


class TestHealth:
    """Tests for the service endpoints."""

    def test_root(self, client: TestClient):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "active"

    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert "database" in response.json()

    def test_root_usa_configuracion_inyectada(self, client: TestClient):
        app.dependency_overrides[get_settings] = lambda: Settings(app_name="API Pruebas", debug_mode=True)

        response = client.get("/")

        assert response.json()["message"] == "API Pruebas"
        assert response.json()["environment"] == "development"

    def test_respuesta_exitosa_con_zona_horaria(self, client: TestClient, rol_instance: Rol):
        response = client.delete(f"/roles/{rol_instance.id}")

        timestamp = datetime.fromisoformat(response.json()["timestamp"])
        assert timestamp.tzinfo is not None
