"""Jefe entity <-> JefeTO conversions."""

from typing import Any

from empresa.mappers import map_list
from empresa.mappers.payload import ensure_object, optional_int, require_str
from empresa.mappers.transfer_objects import JefeTO
from empresa.models.organization import Jefe


def to_transfer(jefe: Jefe) -> JefeTO:
    return JefeTO(
        id=jefe.id,
        nombre=jefe.nombre,
        edad=jefe.edad,
        salario=jefe.salario,
    )


def to_transfer_list(jefes: list[Jefe]) -> list[JefeTO]:
    return map_list(to_transfer, jefes)


def from_payload(payload: Any) -> JefeTO:
    """Build a JefeTO from a request body.  Any ``id`` in the body is ignored."""
    data = ensure_object(payload)
    return JefeTO(
        id=None,
        nombre=require_str(data, "nombre"),
        edad=optional_int(data, "edad"),
        salario=optional_int(data, "salario"),
    )
