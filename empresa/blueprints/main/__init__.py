"""
Main blueprint: service health check.
"""

from flask import Blueprint

bp = Blueprint("main", __name__)

# Import routes after blueprint creation to avoid circular imports.
from empresa.blueprints.main import routes  # noqa: E402, F401
