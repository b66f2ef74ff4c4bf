"""Article repository: same contract as products, no product existence check."""

import pytest

from catalog.core.errors import ResourceNotFoundError
from catalog.models.article import Article
from catalog.repositories import articles as repo


async def test_create_without_matching_product(test_db):
    article = await repo.create_article(
        test_db, Article(product_id=123.0, article_name="dangling"),
    )
    assert article.id == 1
    fetched = await repo.get_article(test_db, article.id)
    assert fetched.product_id == 123.0


async def test_get_missing_raises_not_found(test_db):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await repo.get_article(test_db, 11)
    assert exc_info.value.to_response() == {"error": "Article not found"}


async def test_list_orders_by_id(test_db):
    for name in ("c", "a", "b"):
        await repo.create_article(test_db, Article(product_id=1.0, article_name=name))
    page = await repo.list_articles(test_db, 0, 10)
    assert [a.article_name for a in page] == ["c", "a", "b"]


async def test_update_and_delete(test_db, manager):
    created = await repo.create_article(
        test_db, Article(product_id=1.0, article_name="draft"),
    )
    await repo.update_article(
        test_db, Article(id=created.id, product_id=3.0, article_name="final"),
    )
    async with manager.session() as fresh:
        stored = await repo.get_article(fresh, created.id)
    assert (stored.product_id, stored.article_name) == (3.0, "final")

    await repo.delete_article(test_db, created.id)
    assert await repo.list_articles(test_db, 0, 10) == []
