"""
Audit service: records all data changes and queries audit logs.

Every CREATE, UPDATE, and DELETE operation in the application passes
through this service so that a complete audit trail is maintained.
The ``log_change`` function is the primary entry point, called by
other services before they commit.
"""

import json
import logging
from typing import Any

from flask import has_request_context, request
from sqlalchemy import desc

from empresa.extensions import db
from empresa.models.audit import AuditLog

logger = logging.getLogger(__name__)


# -- Write audit entries ---------------------------------------------------

def log_change(
    action_type: str,
    entity_type: str,
    entity_id: int | None,
    previous_value: dict[str, Any] | None = None,
    new_value: dict[str, Any] | None = None,
) -> AuditLog:
    """
    Record a data change in the audit log.

    The entry joins the caller's transaction; it is persisted when the
    calling service commits.

    Args:
        action_type:    One of CREATE, UPDATE, DELETE.
        entity_type:    Dot-notation entity name (e.g., 'org.empleado').
        entity_id:      Primary key of the affected record.
        previous_value: Dict of the record state before the change.
        new_value:      Dict of the record state after the change.

    Returns:
        The newly created AuditLog record.
    """
    # Capture request metadata when available (not from the CLI).
    ip_address = None
    user_agent = None
    if has_request_context():
        ip_address = request.remote_addr
        user_agent = str(request.user_agent)[:500]

    entry = AuditLog(
        action_type=action_type,
        entity_type=entity_type,
        entity_id=entity_id,
        previous_value=json.dumps(previous_value) if previous_value else None,
        new_value=json.dumps(new_value) if new_value else None,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    db.session.add(entry)
    db.session.flush()

    logger.info("Audit: %s %s:%s", action_type, entity_type, entity_id)
    return entry


# -- Query audit logs ------------------------------------------------------

def get_audit_logs(
    limit: int = 50,
    action_type: str | None = None,
    entity_type: str | None = None,
) -> list[AuditLog]:
    """
    Return the most recent audit entries, newest first.

    Args:
        limit:       Maximum number of entries.
        action_type: Filter by action (CREATE, UPDATE, DELETE).
        entity_type: Filter by entity (e.g., 'org.jefe').
    """
    query = AuditLog.query.order_by(desc(AuditLog.id))

    if action_type:
        query = query.filter(AuditLog.action_type == action_type)
    if entity_type:
        query = query.filter(AuditLog.entity_type == entity_type)

    return query.limit(limit).all()
