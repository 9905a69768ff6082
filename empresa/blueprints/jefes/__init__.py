"""
Jefes blueprint: JSON CRUD endpoints under ``/api/jefes``.
"""

from flask import Blueprint

bp = Blueprint("jefes", __name__)

from empresa.blueprints.jefes import routes  # noqa: E402, F401
