"""Core Layer: error types shared by every other layer.

Invariants:
    - No module in core/ imports from api/, infrastructure/, repositories/ or db/
"""
