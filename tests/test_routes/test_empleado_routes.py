"""
Tests for the /api/empleados endpoints.
"""

import pytest


class TestEmpleadoRoutes:
    """Employee CRUD over HTTP, including the department reference."""

    @pytest.fixture(autouse=True)
    def _setup(self, client):
        self.client = client
        response = client.post(
            "/api/departamentos", json={"nombre": "Informática", "ubicacion": "Valencia"}
        )
        self.departamento = response.get_json()

    def _payload(self, **overrides):
        payload = {
            "nombre": "Jorge",
            "edad": 35,
            "fechaAlta": "2015-09-15",
            "fechaBaja": None,
            "salario": 34000,
            "departamento": {"id": self.departamento["id"]},
        }
        payload.update(overrides)
        return payload

    def _create(self, **overrides):
        response = self.client.post("/api/empleados", json=self._payload(**overrides))
        assert response.status_code == 201
        return response.get_json()

    def test_create_returns_department_summary(self):
        body = self._create()
        assert body["nombre"] == "Jorge"
        assert body["fechaAlta"] == "2015-09-15"
        assert body["fechaBaja"] is None
        assert body["departamento"] == {
            "id": self.departamento["id"],
            "nombre": "Informática",
        }

    def test_get_by_id_round_trip(self):
        created = self._create()
        response = self.client.get(f"/api/empleados/{created['id']}")
        assert response.status_code == 200
        assert response.get_json() == created

    def test_create_with_missing_department_returns_422(self):
        response = self.client.post(
            "/api/empleados", json=self._payload(departamento={"id": 999})
        )
        assert response.status_code == 422
        assert "error" in response.get_json()
        # Nothing was persisted.
        assert self.client.get("/api/empleados").status_code == 404

    def test_create_without_department_returns_400(self):
        payload = self._payload()
        del payload["departamento"]
        response = self.client.post("/api/empleados", json=payload)
        assert response.status_code == 400

    def test_create_with_bad_date_returns_400(self):
        response = self.client.post(
            "/api/empleados", json=self._payload(fechaAlta="15/09/2015")
        )
        assert response.status_code == 400

    def test_update_moves_employee_and_copies_dates(self):
        created = self._create()
        other = self.client.post("/api/departamentos", json={"nombre": "Ventas"}).get_json()

        response = self.client.put(
            f"/api/empleados/{created['id']}",
            json=self._payload(
                fechaAlta="2016-01-04",
                fechaBaja="2024-06-30",
                departamento={"id": other["id"]},
            ),
        )

        assert response.status_code == 200
        body = response.get_json()
        assert body["fechaAlta"] == "2016-01-04"
        assert body["fechaBaja"] == "2024-06-30"
        assert body["departamento"] == {"id": other["id"], "nombre": "Ventas"}

    def test_update_with_missing_department_returns_422_and_keeps_record(self):
        created = self._create()
        response = self.client.put(
            f"/api/empleados/{created['id']}",
            json=self._payload(nombre="Otro", departamento={"id": 999}),
        )
        assert response.status_code == 422
        assert self.client.get(f"/api/empleados/{created['id']}").get_json() == created

    def test_update_missing_employee_returns_404(self):
        response = self.client.put("/api/empleados/999", json=self._payload())
        assert response.status_code == 404

    def test_delete_then_get_returns_404(self):
        created = self._create()
        assert self.client.delete(f"/api/empleados/{created['id']}").status_code == 200
        assert self.client.get(f"/api/empleados/{created['id']}").status_code == 404

    def test_filters(self):
        marta = self._create(nombre="Marta", edad=29, salario=28000)
        jorge = self._create(nombre="Jorge", edad=35, salario=34000)
        lucia = self._create(nombre="Lucia", edad=29, salario=24000)

        get = self.client.get
        assert get("/api/empleados/nombre/Lucia").get_json() == [lucia]
        assert get("/api/empleados/edad/29").get_json() == [marta, lucia]
        assert get("/api/empleados/salariosup/28000").get_json() == [jorge]
        assert get("/api/empleados/salariosinf/28000").get_json() == [lucia]
        assert get("/api/empleados/salariosbet/24000/28000").get_json() == [marta, lucia]
        assert get("/api/empleados/salariosbet/24001/27999").status_code == 404
        assert get("/api/empleados/edad/60").status_code == 404

    def test_filters_accept_negative_numbers(self):
        cero = self._create(nombre="Cero", edad=20, salario=0)
        deuda = self._create(nombre="Deuda", edad=-3, salario=-200)

        get = self.client.get
        assert get("/api/empleados/salariosup/-1").get_json() == [cero]
        assert get("/api/empleados/salariosinf/0").get_json() == [deuda]
        assert get("/api/empleados/salariosbet/-200/-200").get_json() == [deuda]
        assert get("/api/empleados/edad/-3").get_json() == [deuda]
        assert get("/api/empleados/salariosbet/-100/-1").status_code == 404

    def test_update_with_out_of_range_edad_returns_400(self):
        created = self._create()
        response = self.client.put(
            f"/api/empleados/{created['id']}", json=self._payload(edad=-(2**63) - 1)
        )
        assert response.status_code == 400
        assert self.client.get(f"/api/empleados/{created['id']}").get_json() == created
