"""
Model package: imports all models so Alembic and SQLAlchemy can
discover them automatically when ``flask db`` commands are run.

  - organization.py -> jefe, departamento, empleado
  - audit.py        -> audit_log
"""

from empresa.models.organization import (  # noqa: F401
    Departamento,
    Empleado,
    Jefe,
)
from empresa.models.audit import AuditLog  # noqa: F401
