"""
Serve the Empresa JSON API with Waitress.

Usage::

    FLASK_ENV=production DATABASE_URL=... SECRET_KEY=... python wsgi.py

``WAITRESS_HOST`` and ``WAITRESS_PORT`` choose the listening address
(default ``127.0.0.1:8080``).  Apply migrations with ``flask db upgrade``
before the first start; production config refuses to boot without
``DATABASE_URL`` and a non-default ``SECRET_KEY``.
"""

import logging
import os

from waitress import serve

from empresa import create_app

logger = logging.getLogger(__name__)

app = create_app(os.environ.get("FLASK_ENV", "production"))

if __name__ == "__main__":
    host = os.environ.get("WAITRESS_HOST", "127.0.0.1")
    port = int(os.environ.get("WAITRESS_PORT", "8080"))
    logger.info("Serving the Empresa API on %s:%s", host, port)
    serve(app, host=host, port=port)
