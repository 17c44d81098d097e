"""
Domain layer package.

Contains entities, port interfaces and application errors.
No framework imports, no IO, no side effects.
"""
