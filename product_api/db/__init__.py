"""Database Declarations — the declarative Base shared by every ORM model."""
