"""Product REST API — CRUD service for product records.

Invariants:
    - Package root has no import side effects beyond the version string
"""

__version__ = "1.0.0"
