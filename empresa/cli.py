"""
Custom Flask CLI commands.

These commands are registered with the app via ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask db-check                 # Verify database connectivity and tables
    flask init-db                  # Create all tables (local SQLite use)
    flask seed-demo                # Load sample departments, bosses, employees
    flask audit-log --limit 20     # Show the most recent audit entries
"""

from datetime import date

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import inspect

from empresa.extensions import db
from empresa.mappers.transfer_objects import (
    DepartamentoResumenTO,
    DepartamentoTO,
    EmpleadoTO,
    JefeTO,
)
from empresa.models.organization import Departamento, Jefe
from empresa.services import (
    audit_service,
    departamento_service,
    empleado_service,
    jefe_service,
)

# Tables the application expects to find.
_EXPECTED_TABLES = ("jefe", "departamento", "empleado", "audit_log")

# -- Sample data for ``seed-demo`` -----------------------------------------
_DEMO_DEPARTAMENTOS = (
    ("Contabilidad", "Madrid"),
    ("Informática", "Valencia"),
)
_DEMO_JEFES = (
    ("Ana", 40, 50000),
    ("Luis", 52, 72000),
)
# (nombre, edad, fecha_alta, salario, departamento nombre)
_DEMO_EMPLEADOS = (
    ("Marta", 29, date(2019, 3, 1), 28000, "Contabilidad"),
    ("Jorge", 35, date(2015, 9, 15), 34000, "Informática"),
    ("Lucía", 24, date(2023, 1, 9), 24000, "Informática"),
)


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and confirm expected tables exist.

    Runs a simple query against the configured database and reports
    which of the application's tables are present.
    """
    click.echo("=" * 60)
    click.echo("  Empresa: Database Connectivity Check")
    click.echo("=" * 60)

    db_uri = current_app.config["SQLALCHEMY_DATABASE_URI"]
    click.echo(f"\n  Connection string: {db_uri}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/2] Testing connection...")
    try:
        row = db.session.execute(db.text("SELECT 1 AS connected")).fetchone()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Troubleshooting tips:")
        click.echo("    - Is the database server running?")
        click.echo("    - Does your DATABASE_URL match your server config?")
        return
    if row is None or row[0] != 1:
        click.secho("      ✗ Unexpected result from test query.", fg="red")
        return
    click.secho("      ✓ Connected successfully.", fg="green")

    # -- Step 2: Tables ----------------------------------------------------
    click.echo("[2/2] Checking tables...\n")
    existing = set(inspect(db.engine).get_table_names())
    missing = [name for name in _EXPECTED_TABLES if name not in existing]
    for name in _EXPECTED_TABLES:
        mark = "✓" if name in existing else "✗"
        click.echo(f"      {mark} {name}")

    if missing:
        click.secho(
            f"\n      Missing tables: {', '.join(missing)}. "
            "Run 'flask db upgrade' or 'flask init-db'.",
            fg="red",
        )
        return

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Database is ready.", fg="green", bold=True)


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables directly from the models (no migrations)."""
    db.create_all()
    click.secho("Tables created.", fg="green")


@click.command("seed-demo")
@with_appcontext
def seed_demo_command():
    """
    Load a small sample organization.

    Safe to run more than once: rows whose name already exists are
    left untouched.
    """
    departamentos: dict[str, Departamento] = {}
    for nombre, ubicacion in _DEMO_DEPARTAMENTOS:
        existing = departamento_service.find_by_nombre(nombre)
        if existing:
            departamentos[nombre] = existing[0]
            continue
        departamentos[nombre] = departamento_service.create_departamento(
            DepartamentoTO(id=None, nombre=nombre, ubicacion=ubicacion)
        )
        click.echo(f"  + departamento {nombre}")

    for nombre, edad, salario in _DEMO_JEFES:
        if jefe_service.find_by_nombre(nombre):
            continue
        jefe_service.create_jefe(
            JefeTO(id=None, nombre=nombre, edad=edad, salario=salario)
        )
        click.echo(f"  + jefe {nombre}")

    for nombre, edad, fecha_alta, salario, departamento in _DEMO_EMPLEADOS:
        if empleado_service.find_by_nombre(nombre):
            continue
        empleado_service.create_empleado(
            EmpleadoTO(
                id=None,
                nombre=nombre,
                edad=edad,
                fecha_alta=fecha_alta,
                fecha_baja=None,
                salario=salario,
                departamento=DepartamentoResumenTO(
                    id=departamentos[departamento].id
                ),
            )
        )
        click.echo(f"  + empleado {nombre}")

    total = Jefe.query.count()
    click.secho(f"Seed complete ({total} jefes in database).", fg="green")


@click.command("audit-log")
@click.option("--limit", default=20, show_default=True, help="Entries to show.")
@click.option("--entity-type", default=None, help="Filter, e.g. org.empleado.")
@with_appcontext
def audit_log_command(limit: int, entity_type: str | None):
    """Print the most recent audit entries, newest first."""
    entries = audit_service.get_audit_logs(limit=limit, entity_type=entity_type)
    if not entries:
        click.echo("No audit entries.")
        return
    for entry in entries:
        click.echo(
            f"{entry.created_at}  {entry.action_type:<6}  "
            f"{entry.entity_type}:{entry.entity_id}"
        )


def register_commands(app):
    """Attach all custom CLI commands to the Flask app."""
    app.cli.add_command(db_check_command)
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_demo_command)
    app.cli.add_command(audit_log_command)
