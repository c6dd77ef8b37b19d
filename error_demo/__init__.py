"""Centralized HTTP error handling demo built on FastAPI."""
