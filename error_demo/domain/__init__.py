"""
Domain layer package.

Contains entities, domain errors, and port interfaces.
No framework imports allowed in this package.
"""
