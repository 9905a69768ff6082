"""
Tests for jefe_service and departamento_service mutations.
"""

import json

import pytest
from sqlalchemy.exc import IntegrityError

from empresa.exceptions import EntityNotFoundError
from empresa.mappers.transfer_objects import DepartamentoTO, JefeTO
from empresa.models.audit import AuditLog
from empresa.models.organization import Empleado
from empresa.services import departamento_service, jefe_service


class TestJefeService:
    """Create, update and delete bosses through the service layer."""

    @pytest.fixture(autouse=True)
    def _setup(self, db_session):
        self.session = db_session

    def test_create_then_find_by_id(self):
        jefe = jefe_service.create_jefe(
            JefeTO(id=None, nombre="Ana", edad=40, salario=50000)
        )

        found = jefe_service.find_by_id(jefe.id)
        assert (found.nombre, found.edad, found.salario) == ("Ana", 40, 50000)

    def test_update_records_previous_and_new_values(self):
        jefe = jefe_service.create_jefe(
            JefeTO(id=None, nombre="Ana", edad=40, salario=50000)
        )

        jefe_service.update_jefe(
            jefe.id, JefeTO(id=None, nombre="Ana", edad=41, salario=55000)
        )

        entry = AuditLog.query.filter_by(action_type="UPDATE").one()
        assert json.loads(entry.previous_value)["salario"] == 50000
        assert json.loads(entry.new_value)["salario"] == 55000
        # Service calls outside a request carry no client metadata.
        assert entry.ip_address is None

    def test_update_missing_raises(self):
        with pytest.raises(EntityNotFoundError) as excinfo:
            jefe_service.update_jefe(7, JefeTO(id=None, nombre="X", edad=None, salario=None))
        assert excinfo.value.entity_id == 7

    def test_delete_then_lookup_is_none(self):
        jefe = jefe_service.create_jefe(
            JefeTO(id=None, nombre="Ana", edad=40, salario=50000)
        )
        jefe_id = jefe.id

        jefe_service.delete_jefe_by_id(jefe_id)

        assert jefe_service.find_by_id(jefe_id) is None
        assert jefe_service.get_all() == []


class TestDepartamentoService:
    """Department mutations."""

    def test_delete_referenced_department_raises_integrity_error(self, db_session):
        departamento = departamento_service.create_departamento(
            DepartamentoTO(id=None, nombre="Ventas", ubicacion=None)
        )
        db_session.add(Empleado(nombre="Marta", departamento_id=departamento.id))
        db_session.commit()

        with pytest.raises(IntegrityError):
            departamento_service.delete_departamento_by_id(departamento.id)
        db_session.rollback()

        assert departamento_service.find_by_id(departamento.id) is not None

    def test_update_missing_department_raises(self, db_session):  # pylint: disable=unused-argument
        with pytest.raises(EntityNotFoundError):
            departamento_service.update_departamento(
                3, DepartamentoTO(id=None, nombre="X", ubicacion=None)
            )
