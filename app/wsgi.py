"""
WSGI compatibility layer.

Exposes the ASGI FastAPI application to WSGI servers such as
Gunicorn (sync workers) or Waitress. Prefer ASGI deployment when possible.
"""

from a2wsgi import ASGIMiddleware

from app.main import app

application = ASGIMiddleware(app)
