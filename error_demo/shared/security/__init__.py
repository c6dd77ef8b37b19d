"""Security middleware."""
