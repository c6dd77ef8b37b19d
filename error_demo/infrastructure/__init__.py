"""
Infrastructure layer package.

Concrete adapters implementing domain ports.
"""
