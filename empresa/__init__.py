"""
Application factory for the Empresa organizational CRUD API.

Usage::

    from empresa import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.
"""

import logging
import os

from flask import Flask, jsonify
from sqlalchemy.exc import IntegrityError

from .config import config_by_name
from .exceptions import EmpresaError
from .extensions import db, migrate

logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Refuse to start production with missing or default secrets.  Must
    # run before the database extension reads its URI.
    if config_name == "production":
        config_class.validate_production_secrets(app.config)

    # Keep accented names readable and fields in declaration order.
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    # -- Initialize extensions ---------------------------------------------
    _register_extensions(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    return app


def _register_extensions(app: Flask) -> None:
    """Bind all Flask extensions to the application instance."""
    db.init_app(app)
    migrate.init_app(app, db)

    # Import models so metadata is complete for create_all and Alembic.
    from . import models  # noqa: F401  pylint: disable=import-outside-toplevel


def _register_blueprints(app: Flask) -> None:
    """
    Import and register each blueprint with its URL prefix.

    Blueprints are imported inside this function to avoid circular
    imports: models and services can safely import ``db`` from
    extensions at module level.
    """
    # pylint: disable=import-outside-toplevel
    from .blueprints import BigIntConverter

    # Must be known before any rule using ``<bigint:...>`` is added.
    app.url_map.converters["bigint"] = BigIntConverter

    # Main blueprint: health check.
    from .blueprints.main import bp as main_bp

    app.register_blueprint(main_bp)

    from .blueprints.jefes import bp as jefes_bp

    app.register_blueprint(jefes_bp, url_prefix="/api/jefes")

    from .blueprints.empleados import bp as empleados_bp

    app.register_blueprint(empleados_bp, url_prefix="/api/empleados")

    from .blueprints.departamentos import bp as departamentos_bp

    app.register_blueprint(departamentos_bp, url_prefix="/api/departamentos")


def _register_error_handlers(app: Flask) -> None:
    """Translate domain, database, and HTTP errors into JSON responses."""

    @app.errorhandler(EmpresaError)
    def empresa_error(error: EmpresaError):
        """Handle not-found, missing-reference, and bad-payload errors."""
        db.session.rollback()
        return jsonify(error=str(error)), error.status_code

    @app.errorhandler(IntegrityError)
    def integrity_error(error: IntegrityError):
        """A write violated a database constraint (e.g. a foreign key)."""
        db.session.rollback()
        logger.warning("Integrity error: %s", error.orig)
        return jsonify(error="La operación viola una restricción de integridad."), 409

    @app.errorhandler(404)
    def not_found(error):  # pylint: disable=unused-argument
        """Handle 404 Not Found errors for unknown routes."""
        return jsonify(error="Recurso no encontrado."), 404

    @app.errorhandler(405)
    def method_not_allowed(error):  # pylint: disable=unused-argument
        """Handle 405 Method Not Allowed errors."""
        return jsonify(error="Método no permitido."), 405

    @app.errorhandler(500)
    def internal_error(error):  # pylint: disable=unused-argument
        """Handle 500 Internal Server Error."""
        db.session.rollback()
        return jsonify(error="Error interno del servidor."), 500


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    from .cli import register_commands  # pylint: disable=import-outside-toplevel

    register_commands(app)


def _configure_logging(app: Flask) -> None:
    """
    Set up application logging from the ``LOG_LEVEL`` setting.

    SQLAlchemy's engine logger is quieted in debug mode because
    ``SQLALCHEMY_ECHO`` already prints every statement.
    """
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
