"""Pydantic Schemas: request/response contracts for the HTTP API.

Invariants:
    - JSON bodies are decoded into concrete schema types, never loose dicts
    - Schemas are API contracts; models/ are persistence
"""
