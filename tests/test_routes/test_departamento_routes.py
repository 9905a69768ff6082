"""
Tests for the /api/departamentos endpoints.
"""


def _create(client, nombre, ubicacion=None):
    response = client.post(
        "/api/departamentos", json={"nombre": nombre, "ubicacion": ubicacion}
    )
    assert response.status_code == 201
    return response.get_json()


class TestDepartamentoRoutes:
    """CRUD and name lookup for departments."""

    def test_list_is_404_when_empty(self, client):
        assert client.get("/api/departamentos").status_code == 404

    def test_create_and_get(self, client):
        created = _create(client, "Informática", "Valencia")
        assert created["nombre"] == "Informática"
        response = client.get(f"/api/departamentos/{created['id']}")
        assert response.status_code == 200
        assert response.get_json() == created

    def test_non_ascii_names_are_not_escaped(self, client):
        _create(client, "Informática")
        response = client.get("/api/departamentos")
        assert "Informática".encode() in response.data

    def test_find_by_nombre(self, client):
        contabilidad = _create(client, "Contabilidad")
        _create(client, "Ventas")
        response = client.get("/api/departamentos/nombre/Contabilidad")
        assert response.get_json() == [contabilidad]
        assert client.get("/api/departamentos/nombre/Legal").status_code == 404

    def test_update_replaces_fields(self, client):
        created = _create(client, "Ventas", "Sevilla")
        response = client.put(
            f"/api/departamentos/{created['id']}", json={"nombre": "Ventas Sur"}
        )
        assert response.status_code == 200
        assert response.get_json() == {
            "id": created["id"],
            "nombre": "Ventas Sur",
            "ubicacion": None,
        }

    def test_update_missing_department_returns_404(self, client):
        response = client.put("/api/departamentos/42", json={"nombre": "X"})
        assert response.status_code == 404

    def test_delete_unreferenced_department(self, client):
        created = _create(client, "Ventas")
        assert client.delete(f"/api/departamentos/{created['id']}").status_code == 200
        assert client.get(f"/api/departamentos/{created['id']}").status_code == 404

    def test_delete_department_with_employees_returns_409(self, client):
        created = _create(client, "Ventas")
        client.post(
            "/api/empleados",
            json={"nombre": "Marta", "departamento": {"id": created["id"]}},
        )
        response = client.delete(f"/api/departamentos/{created['id']}")
        assert response.status_code == 409
        # The department survives the rejected delete.
        assert client.get(f"/api/departamentos/{created['id']}").status_code == 200
