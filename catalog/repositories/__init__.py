"""Data Access Layer: one module per table, one SQL statement per function.

Invariants:
    - Every function takes the AsyncSession handle as its first argument
    - Statements are parameterized SQLAlchemy constructs (no string SQL)
    - update/delete do not check affected rows: a missing id is a silent no-op
    - No function retries or spans more than one statement
"""
