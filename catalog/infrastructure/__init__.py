"""Infrastructure Layer: database engine lifecycle and logging setup.

Invariants:
    - Infrastructure never imports from api/ or repositories/
    - All SQLAlchemy exceptions leave this layer as DatabaseError
"""
