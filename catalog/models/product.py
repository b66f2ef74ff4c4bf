"""Product ORM: one row of the products table.

Invariants:
    - id is an integer primary key assigned by the database (SERIAL on PostgreSQL)
    - name is non-nullable text
    - price is NUMERIC(10,2), defaults to 0.00, read back as float
"""

from sqlalchemy import Integer, Numeric, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base


class Product(Base):
    """Product record."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
        default=0.0,
        server_default=text("0.00"),
    )

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"
