"""
Users bounded context: interface layer.

FastAPI router, schemas and dependency wiring for user endpoints.
"""
