"""
Audit logging model.

``AuditLog`` records every data change made through the API.
"""

from empresa.extensions import db


class AuditLog(db.Model):
    """
    Records all data changes in the application.

    Change details are stored as JSON blobs for flexibility.

    ``action_type`` values: CREATE, UPDATE, DELETE.

    JSON conventions for ``previous_value`` / ``new_value``:
      - CREATE: previous_value is NULL, new_value has full record.
      - UPDATE: both contain the full record.
      - DELETE: both are NULL; only the id is recorded.
    """

    __tablename__ = "audit_log"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    action_type = db.Column(db.String(50), nullable=False)
    entity_type = db.Column(db.String(100), nullable=False, index=True)
    entity_id = db.Column(db.Integer, nullable=True)
    previous_value = db.Column(db.Text, nullable=True)
    new_value = db.Column(db.Text, nullable=True)
    ip_address = db.Column(db.String(45), nullable=True)
    user_agent = db.Column(db.String(500), nullable=True)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.now()
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLog {self.action_type} {self.entity_type}"
            f":{self.entity_id}>"
        )
