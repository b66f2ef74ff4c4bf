"""Article ORM: one row of the articles table.

Invariants:
    - id is an integer primary key assigned by the database
    - product_id references a product by value only; no ForeignKey is declared
    - product_id is NUMERIC(10,2) with a 1.00 default
"""

from sqlalchemy import Integer, Numeric, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base


class Article(Base):
    """Article record."""
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    product_id: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
        default=1.0,
        server_default=text("1.00"),
    )
    article_name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"Article(id={self.id!r}, product_id={self.product_id!r}, "
            f"article_name={self.article_name!r})"
        )
