"""
Tests for audit_service queries.
"""

from empresa.services import audit_service


class TestAuditLogQueries:
    """Recent-entry queries used by the ``audit-log`` CLI command."""

    def test_newest_first_with_limit(self, db_session):
        for entity_id in (1, 2, 3):
            audit_service.log_change("CREATE", "org.jefe", entity_id)
        db_session.commit()

        entries = audit_service.get_audit_logs(limit=2)

        assert [entry.entity_id for entry in entries] == [3, 2]

    def test_filters_by_entity_and_action(self, db_session):
        audit_service.log_change("CREATE", "org.jefe", 1, new_value={"nombre": "Ana"})
        audit_service.log_change("CREATE", "org.empleado", 1)
        audit_service.log_change("DELETE", "org.jefe", 1)
        db_session.commit()

        jefe_entries = audit_service.get_audit_logs(entity_type="org.jefe")
        deletes = audit_service.get_audit_logs(action_type="DELETE")

        assert len(jefe_entries) == 2
        assert [(e.action_type, e.entity_type) for e in deletes] == [
            ("DELETE", "org.jefe")
        ]

    def test_request_metadata_is_captured(self, client):
        client.post(
            "/api/jefes",
            json={"nombre": "Ana"},
            headers={"User-Agent": "pytest-agent"},
        )

        entry = audit_service.get_audit_logs(limit=1)[0]
        assert entry.user_agent == "pytest-agent"
        assert entry.ip_address == "127.0.0.1"
