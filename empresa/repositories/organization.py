"""
Per-entity repositories for bosses, departments and employees.
"""

from empresa.models.organization import Departamento, Empleado, Jefe
from empresa.repositories.base import Comparison, ModelT, Repository


class NamedRepository(Repository[ModelT]):
    """Repository for models with a ``nombre`` column."""

    def find_by_nombre(self, nombre: str) -> list[ModelT]:
        return self.find_by("nombre", Comparison.EQ, nombre)


class PersonaRepository(NamedRepository[ModelT]):
    """Age and salary lookups shared by ``Jefe`` and ``Empleado``."""

    def find_by_edad(self, edad: int) -> list[ModelT]:
        return self.find_by("edad", Comparison.EQ, edad)

    def find_by_salario_greater_than(self, salario: int) -> list[ModelT]:
        return self.find_by("salario", Comparison.GT, salario)

    def find_by_salario_less_than(self, salario: int) -> list[ModelT]:
        return self.find_by("salario", Comparison.LT, salario)

    def find_by_salario_between(
        self, salario_min: int, salario_max: int
    ) -> list[ModelT]:
        """Salaries within ``[salario_min, salario_max]``, both inclusive."""
        return self.find_by("salario", Comparison.BETWEEN, salario_min, salario_max)


# Singleton instances used by the service layer.
jefe_repository: PersonaRepository[Jefe] = PersonaRepository(Jefe)
empleado_repository: PersonaRepository[Empleado] = PersonaRepository(Empleado)
departamento_repository: NamedRepository[Departamento] = NamedRepository(
    Departamento
)
