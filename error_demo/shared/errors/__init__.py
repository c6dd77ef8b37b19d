"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that raised errors
are consistently translated into API responses.
"""
