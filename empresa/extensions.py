"""
Flask extension instances.

Extensions are created here without binding to an application so that
the application factory can call ``init_app()`` on each one during
``create_app()``.  This avoids circular imports and follows the
standard Flask extension pattern.
"""

import sqlite3

from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

# -- Database ORM ----------------------------------------------------------
# The ``db`` instance is imported by models and repositories.
db = SQLAlchemy()

# -- Schema migrations (Alembic via Flask-Migrate) -------------------------
migrate = Migrate()


# -- SQLite foreign keys ---------------------------------------------------
# SQLite ignores FOREIGN KEY clauses unless this pragma is set on every
# new connection.
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):  # pylint: disable=unused-argument
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
