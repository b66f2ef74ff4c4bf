"""ORM Models: SQLAlchemy declarative models for products and articles.

Invariants:
    - All models inherit from Base (db/base.py)
    - articles.product_id is a plain numeric column, not a foreign key

Design Decisions:
    - All models imported here so Base.metadata knows every table before create_all
"""

from catalog.models.product import Product  # noqa: F401
from catalog.models.article import Article  # noqa: F401
