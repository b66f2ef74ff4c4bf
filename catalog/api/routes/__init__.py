"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes decode input and delegate every statement to repositories/
"""
