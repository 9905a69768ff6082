"""
Repository package: ORM data access, one repository per entity.
"""

from empresa.repositories.base import Comparison, Repository, build_condition  # noqa: F401
from empresa.repositories.organization import (  # noqa: F401
    NamedRepository,
    PersonaRepository,
    departamento_repository,
    empleado_repository,
    jefe_repository,
)
