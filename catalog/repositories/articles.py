"""Article data access: get, page, insert, update, delete on the articles table.

product_id is written as given; it is never checked against the products table.
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.errors import ResourceNotFoundError
from catalog.models.article import Article

logger = logging.getLogger(__name__)


async def get_article(db: AsyncSession, article_id: int) -> Article:
    """Fetch one article by primary key or raise ResourceNotFoundError."""
    result = await db.execute(select(Article).where(Article.id == article_id))
    article = result.scalar_one_or_none()
    if article is None:
        raise ResourceNotFoundError("Article", str(article_id))
    return article


async def list_articles(
    db: AsyncSession, offset: int, limit: int,
) -> list[Article]:
    result = await db.execute(
        select(Article).order_by(Article.id).offset(offset).limit(limit),
    )
    return list(result.scalars().all())


async def create_article(db: AsyncSession, article: Article) -> Article:
    """Insert and populate article.id from the database-generated key."""
    result = await db.execute(
        insert(Article)
        .values(product_id=article.product_id, article_name=article.article_name)
        .returning(Article.id),
    )
    article.id = result.scalar_one()
    await db.commit()
    logger.debug("Inserted article", extra={"entity": "article", "record_id": article.id})
    return article


async def update_article(db: AsyncSession, article: Article) -> Article:
    await db.execute(
        update(Article)
        .where(Article.id == article.id)
        .values(product_id=article.product_id, article_name=article.article_name)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
    return article


async def delete_article(db: AsyncSession, article_id: int) -> None:
    await db.execute(
        delete(Article)
        .where(Article.id == article_id)
        .execution_options(synchronize_session=False),
    )
    await db.commit()
