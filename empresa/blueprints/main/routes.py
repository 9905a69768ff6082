"""
Routes for the main blueprint: health check.
"""

from sqlalchemy import text

from empresa.blueprints.main import bp
from empresa.extensions import db


@bp.route("/health")
def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if the app is running and can reach the database.
    """
    try:
        db.session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}, 200
    except Exception as exc:  # pylint: disable=broad-except
        return {"status": "unhealthy", "database": str(exc)}, 503
