"""Product data access: get, page, insert, update, delete on the products table."""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.errors import ResourceNotFoundError
from catalog.models.product import Product

logger = logging.getLogger(__name__)


async def get_product(db: AsyncSession, product_id: int) -> Product:
    """Fetch one product by primary key or raise ResourceNotFoundError."""
    result = await db.execute(select(Product).where(Product.id == product_id))
    product = result.scalar_one_or_none()
    if product is None:
        raise ResourceNotFoundError("Product", str(product_id))
    return product


async def list_products(
    db: AsyncSession, offset: int, limit: int,
) -> list[Product]:
    """Fetch a page of products in insertion (id) order. Empty list when none."""
    result = await db.execute(
        select(Product).order_by(Product.id).offset(offset).limit(limit),
    )
    return list(result.scalars().all())


async def create_product(db: AsyncSession, product: Product) -> Product:
    """Insert and populate product.id from the database-generated key."""
    result = await db.execute(
        insert(Product)
        .values(name=product.name, price=product.price)
        .returning(Product.id),
    )
    product.id = result.scalar_one()
    await db.commit()
    logger.debug("Inserted product", extra={"entity": "product", "record_id": product.id})
    return product


async def update_product(db: AsyncSession, product: Product) -> Product:
    """Overwrite name and price of the row with product.id."""
    await db.execute(
        update(Product)
        .where(Product.id == product.id)
        .values(name=product.name, price=product.price)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    return product


async def delete_product(db: AsyncSession, product_id: int) -> None:
    await db.execute(
        delete(Product)
        .where(Product.id == product_id)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
