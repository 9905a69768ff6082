"""
Tests for the generic repository and its query builder.
"""

import pytest

from empresa.models.organization import Jefe
from empresa.repositories import Comparison, build_condition, jefe_repository


class TestBuildCondition:
    """Operator arity checks."""

    def test_between_requires_two_values(self):
        with pytest.raises(ValueError):
            build_condition(Jefe.salario, Comparison.BETWEEN, 1)

    def test_eq_rejects_two_values(self):
        with pytest.raises(ValueError):
            build_condition(Jefe.salario, Comparison.EQ, 1, 2)


class TestSalaryQueries:
    """Boundary behavior of the salary comparisons."""

    @pytest.fixture(autouse=True)
    def _setup(self, db_session):
        self.jefes = [
            Jefe(nombre="A", edad=30, salario=999),
            Jefe(nombre="B", edad=30, salario=1000),
            Jefe(nombre="C", edad=40, salario=1500),
            Jefe(nombre="D", edad=50, salario=2000),
            Jefe(nombre="E", edad=50, salario=2001),
        ]
        db_session.add_all(self.jefes)
        db_session.commit()

    @staticmethod
    def _names(jefes):
        return [jefe.nombre for jefe in jefes]

    def test_between_is_inclusive(self):
        result = jefe_repository.find_by_salario_between(1000, 2000)
        assert self._names(result) == ["B", "C", "D"]

    def test_between_matches_gt_min_minus_one_and_lt_max_plus_one(self):
        between = {j.id for j in jefe_repository.find_by_salario_between(1000, 2000)}
        above = {j.id for j in jefe_repository.find_by_salario_greater_than(999)}
        below = {j.id for j in jefe_repository.find_by_salario_less_than(2001)}
        assert between == above & below

    def test_greater_than_excludes_boundary(self):
        assert self._names(jefe_repository.find_by_salario_greater_than(2000)) == ["E"]

    def test_less_than_excludes_boundary(self):
        assert self._names(jefe_repository.find_by_salario_less_than(1000)) == ["A"]

    def test_reversed_bounds_match_nothing(self):
        assert jefe_repository.find_by_salario_between(2000, 1000) == []

    def test_find_by_edad_exact(self):
        assert self._names(jefe_repository.find_by_edad(50)) == ["D", "E"]

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            jefe_repository.find_by("sueldo", Comparison.EQ, 1)


class TestPersistence:
    """save / find_by_id / delete_by_id."""

    def test_save_populates_id(self, db_session):  # pylint: disable=unused-argument
        jefe = jefe_repository.save(Jefe(nombre="Ana"))
        assert jefe.id is not None
        assert jefe_repository.find_by_id(jefe.id) is jefe

    def test_delete_missing_returns_false(self, db_session):  # pylint: disable=unused-argument
        assert jefe_repository.delete_by_id(404) is False

    def test_delete_existing_returns_true(self, db_session):  # pylint: disable=unused-argument
        jefe = jefe_repository.save(Jefe(nombre="Ana"))
        assert jefe_repository.delete_by_id(jefe.id) is True
        assert jefe_repository.find_by_id(jefe.id) is None

    def test_entity_type(self):
        assert jefe_repository.entity_type == "org.jefe"
