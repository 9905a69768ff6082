"""
Database connectivity and schema verification tests.

These tests confirm that:
  - The application can connect to the configured database.
  - The expected tables exist after the schema is created.
"""

from sqlalchemy import inspect

from empresa.extensions import db


class TestDatabaseConnectivity:
    """Verify that the app can talk to the database."""

    def test_basic_connection(self, db_session):
        """Execute a simple SELECT 1 query."""
        row = db_session.execute(db.text("SELECT 1 AS connected")).fetchone()
        assert row is not None
        assert row[0] == 1

    def test_expected_tables_exist(self, db_session):  # pylint: disable=unused-argument
        tables = set(inspect(db.engine).get_table_names())
        assert {"jefe", "departamento", "empleado", "audit_log"} <= tables
