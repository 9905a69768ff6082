"""Departamento entity <-> DepartamentoTO conversions."""

from typing import Any

from empresa.mappers import map_list
from empresa.mappers.payload import ensure_object, optional_str, require_str
from empresa.mappers.transfer_objects import DepartamentoResumenTO, DepartamentoTO
from empresa.models.organization import Departamento


def to_transfer(departamento: Departamento) -> DepartamentoTO:
    return DepartamentoTO(
        id=departamento.id,
        nombre=departamento.nombre,
        ubicacion=departamento.ubicacion,
    )


def to_transfer_list(departamentos: list[Departamento]) -> list[DepartamentoTO]:
    return map_list(to_transfer, departamentos)


def to_summary(departamento: Departamento) -> DepartamentoResumenTO:
    """Flatten a department to the id + display name embedded in employees."""
    return DepartamentoResumenTO(id=departamento.id, nombre=departamento.nombre)


def from_payload(payload: Any) -> DepartamentoTO:
    data = ensure_object(payload)
    return DepartamentoTO(
        id=None,
        nombre=require_str(data, "nombre"),
        ubicacion=optional_str(data, "ubicacion"),
    )
