"""
Helpers for reading fields out of a decoded JSON request body.

Every helper raises ``PayloadError`` with a message naming the offending
field, which the application turns into a 400 response.
"""

from datetime import date
from typing import Any

from empresa.exceptions import PayloadError

# Range of the INTEGER/BIGINT columns the values are stored in.
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


def ensure_object(payload: Any) -> dict[str, Any]:
    """Return ``payload`` if it is a JSON object, else raise."""
    if not isinstance(payload, dict):
        raise PayloadError("El cuerpo de la petición debe ser un objeto JSON.")
    return payload


def require_str(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str) or not value.strip():
        raise PayloadError(f"'{key}' es obligatorio y debe ser texto.")
    return value


def optional_str(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise PayloadError(f"'{key}' debe ser texto.")
    return value


def optional_int(payload: dict[str, Any], key: str) -> int | None:
    value = payload.get(key)
    if value is None:
        return None
    # bool is a subclass of int; JSON true/false is never a number here.
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadError(f"'{key}' debe ser un número entero.")
    if not BIGINT_MIN <= value <= BIGINT_MAX:
        raise PayloadError(f"'{key}' está fuera del rango permitido.")
    return value


def optional_date(payload: dict[str, Any], key: str) -> date | None:
    """Parse an ISO-8601 ``YYYY-MM-DD`` string, or None if absent."""
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise PayloadError(f"'{key}' debe ser una fecha ISO (AAAA-MM-DD).")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise PayloadError(
            f"'{key}' debe ser una fecha ISO (AAAA-MM-DD)."
        ) from exc


def require_reference_id(payload: dict[str, Any], key: str) -> int:
    """Return ``payload[key]['id']`` for a nested ``{"id": ...}`` reference."""
    reference = payload.get(key)
    if not isinstance(reference, dict):
        raise PayloadError(f"'{key}' es obligatorio y debe incluir 'id'.")
    reference_id = optional_int(reference, "id")
    if reference_id is None:
        raise PayloadError(f"'{key}.id' es obligatorio.")
    return reference_id
