"""
Application layer package.

Contains use cases that orchestrate domain objects through ports.
"""
