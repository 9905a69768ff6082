"""
Organization models: bosses, departments and employees.

Rows are created and modified only through the service layer, which
records an audit entry for every change.
"""

from empresa.extensions import db


class Jefe(db.Model):
    """
    A boss.  Standalone record with no foreign keys.

    ``salario`` is stored as a whole number; no range is enforced on it
    or on ``edad``.
    """

    __tablename__ = "jefe"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    nombre = db.Column(db.String(200), nullable=False, index=True)
    edad = db.Column(db.Integer, nullable=True, index=True)
    salario = db.Column(db.BigInteger, nullable=True, index=True)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )

    def __repr__(self) -> str:
        return f"<Jefe {self.id}: {self.nombre}>"


class Departamento(db.Model):
    """
    Department referenced by zero or more employees.

    Deleting a department that still has employees violates the foreign
    key on ``empleado.departamento_id``.
    """

    __tablename__ = "departamento"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    nombre = db.Column(db.String(200), nullable=False, index=True)
    ubicacion = db.Column(db.String(200), nullable=True)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )

    # -- Relationships -----------------------------------------------------
    empleados = db.relationship(
        "Empleado",
        back_populates="departamento",
        lazy="dynamic",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Departamento {self.id}: {self.nombre}>"


class Empleado(db.Model):
    """
    Employee belonging to exactly one department.

    ``fecha_baja`` stays NULL while the employee is still active.
    """

    __tablename__ = "empleado"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    departamento_id = db.Column(
        db.Integer,
        db.ForeignKey("departamento.id"),
        nullable=False,
        index=True,
    )
    nombre = db.Column(db.String(200), nullable=False, index=True)
    edad = db.Column(db.Integer, nullable=True, index=True)
    fecha_alta = db.Column(db.Date, nullable=True)
    fecha_baja = db.Column(db.Date, nullable=True)
    salario = db.Column(db.BigInteger, nullable=True, index=True)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )

    # -- Relationships -----------------------------------------------------
    departamento = db.relationship("Departamento", back_populates="empleados")

    def __repr__(self) -> str:
        return f"<Empleado {self.id}: {self.nombre}>"
