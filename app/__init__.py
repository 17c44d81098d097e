"""
Standard API Response: a FastAPI backend with a uniform response envelope.

Application package root. This is a small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: Read-only listing of sample users.

Layers:
    - domain: Entities, ports (ABCs), application errors.
    - application: Use cases, DTOs.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (envelope, errors, security, logging).
"""
