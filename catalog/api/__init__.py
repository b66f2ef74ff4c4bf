"""API Layer: FastAPI routes, request parameter decoding and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON; every non-2xx body is {"error": "<message>"}
"""
