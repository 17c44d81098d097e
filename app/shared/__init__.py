"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Response envelope
- Error handling and mapping
- Security middleware
- Rate limiting
- Logging configuration
"""
