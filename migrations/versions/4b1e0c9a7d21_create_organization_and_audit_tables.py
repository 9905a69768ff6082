"""Create organization and audit tables

Initial schema: ``departamento``, ``jefe``, ``empleado`` (with its
foreign key to ``departamento``) and ``audit_log``.

Revision ID: 4b1e0c9a7d21
Revises:
Create Date: 2026-10-19 09:12:44.301552

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4b1e0c9a7d21"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column(
            "created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade():
    """Create all application tables."""
    op.create_table(
        "departamento",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=200), nullable=False),
        sa.Column("ubicacion", sa.String(length=200), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_departamento_nombre", "departamento", ["nombre"])

    op.create_table(
        "jefe",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=200), nullable=False),
        sa.Column("edad", sa.Integer(), nullable=True),
        sa.Column("salario", sa.BigInteger(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_jefe_nombre", "jefe", ["nombre"])
    op.create_index("ix_jefe_edad", "jefe", ["edad"])
    op.create_index("ix_jefe_salario", "jefe", ["salario"])

    op.create_table(
        "empleado",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("departamento_id", sa.Integer(), nullable=False),
        sa.Column("nombre", sa.String(length=200), nullable=False),
        sa.Column("edad", sa.Integer(), nullable=True),
        sa.Column("fecha_alta", sa.Date(), nullable=True),
        sa.Column("fecha_baja", sa.Date(), nullable=True),
        sa.Column("salario", sa.BigInteger(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["departamento_id"], ["departamento.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_empleado_departamento_id", "empleado", ["departamento_id"])
    op.create_index("ix_empleado_nombre", "empleado", ["nombre"])
    op.create_index("ix_empleado_edad", "empleado", ["edad"])
    op.create_index("ix_empleado_salario", "empleado", ["salario"])

    op.create_table(
        "audit_log",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("action_type", sa.String(length=50), nullable=False),
        sa.Column("entity_type", sa.String(length=100), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=True),
        sa.Column("previous_value", sa.Text(), nullable=True),
        sa.Column("new_value", sa.Text(), nullable=True),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.Column("user_agent", sa.String(length=500), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_audit_log_entity_type", "audit_log", ["entity_type"])


def downgrade():
    """Drop all application tables in reverse dependency order."""
    op.drop_index("ix_audit_log_entity_type", table_name="audit_log")
    op.drop_table("audit_log")
    op.drop_index("ix_empleado_salario", table_name="empleado")
    op.drop_index("ix_empleado_edad", table_name="empleado")
    op.drop_index("ix_empleado_nombre", table_name="empleado")
    op.drop_index("ix_empleado_departamento_id", table_name="empleado")
    op.drop_table("empleado")
    op.drop_index("ix_jefe_salario", table_name="jefe")
    op.drop_index("ix_jefe_edad", table_name="jefe")
    op.drop_index("ix_jefe_nombre", table_name="jefe")
    op.drop_table("jefe")
    op.drop_index("ix_departamento_nombre", table_name="departamento")
    op.drop_table("departamento")
