"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error translation
- Security headers
- Logging configuration and request logging
"""
