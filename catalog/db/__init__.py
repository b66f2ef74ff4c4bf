"""Database Declarations: SQLAlchemy Base shared by all ORM models.

Invariants:
    - Single async engine per process, owned by infrastructure/database.py
"""
