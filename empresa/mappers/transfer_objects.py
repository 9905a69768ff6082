"""
Transfer objects: the shapes exchanged over the HTTP boundary.

These are request/response scoped only and never persisted.  ``to_dict``
produces the JSON body with the public (camelCase, Spanish) field names.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass
class JefeTO:
    """A boss as seen by API clients."""

    id: int | None
    nombre: str
    edad: int | None
    salario: int | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "edad": self.edad,
            "salario": self.salario,
        }


@dataclass
class DepartamentoTO:
    """A department with all of its descriptive fields."""

    id: int | None
    nombre: str
    ubicacion: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "ubicacion": self.ubicacion,
        }


@dataclass
class DepartamentoResumenTO:
    """
    Department summary embedded in an employee.

    Requests only need ``id``; responses also carry ``nombre``.
    """

    id: int
    nombre: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "nombre": self.nombre}


@dataclass
class EmpleadoTO:
    """An employee with its department flattened to a summary."""

    id: int | None
    nombre: str
    edad: int | None
    fecha_alta: date | None
    fecha_baja: date | None
    salario: int | None
    departamento: DepartamentoResumenTO

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "edad": self.edad,
            "fechaAlta": _iso(self.fecha_alta),
            "fechaBaja": _iso(self.fecha_baja),
            "salario": self.salario,
            "departamento": self.departamento.to_dict(),
        }
