"""
Empleados blueprint: JSON CRUD endpoints under ``/api/empleados``.
"""

from flask import Blueprint

bp = Blueprint("empleados", __name__)

from empresa.blueprints.empleados import routes  # noqa: E402, F401
