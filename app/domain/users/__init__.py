"""
Users bounded context: domain layer.

Holds the user entity, the repository port and the
application error raised for expected request failures.
"""
