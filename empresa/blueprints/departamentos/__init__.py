"""
Departamentos blueprint: JSON CRUD endpoints under ``/api/departamentos``.
"""

from flask import Blueprint

bp = Blueprint("departamentos", __name__)

from empresa.blueprints.departamentos import routes  # noqa: E402, F401
