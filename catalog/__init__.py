"""Catalog API package: CRUD over products and articles.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
