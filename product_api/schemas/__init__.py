"""Pydantic Schemas — documented request/response shapes for the API.

Invariants:
    - Schemas describe the HTTP contract; models/ describe persistence
"""
