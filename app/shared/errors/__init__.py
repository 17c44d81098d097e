"""
Shared error handling package.

Centralizes failure-to-envelope mapping so that every error
reaches the client in the standard response shape.
"""
