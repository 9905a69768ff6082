"""
Domain exceptions raised by the service and mapper layers.

The application factory maps each of these to a JSON error response,
so routes never need their own try/except blocks.
"""


class EmpresaError(Exception):
    """Base class for all application errors."""

    status_code = 500


class EntityNotFoundError(EmpresaError, LookupError):
    """The entity addressed by the request does not exist."""

    status_code = 404

    def __init__(self, entity_type: str, entity_id: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} {entity_id} no encontrado")


class ReferenceNotFoundError(EmpresaError):
    """A foreign-key reference in the request body points nowhere."""

    status_code = 422

    def __init__(self, entity_type: str, entity_id: int | None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} {entity_id} no encontrado")


class PayloadError(EmpresaError, ValueError):
    """The request body is not a valid transfer representation."""

    status_code = 400
