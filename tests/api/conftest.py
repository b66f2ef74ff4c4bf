"""API test fixtures: the app served over httpx against the test manager.

Requests go through the real get_db dependency; only the process-wide
db_manager is swapped for the in-memory one.
"""

import pytest
from httpx import ASGITransport, AsyncClient

import catalog.infrastructure.database as db_module
from catalog.main import app
from catalog.models.article import Article
from catalog.models.product import Product


@pytest.fixture
async def client(manager, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", manager)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def seed_products(test_db):
    """Return an async helper inserting `count` products named 'Product <i>'."""
    async def _seed(count: int = 1) -> list[Product]:
        products = [
            Product(name=f"Product {i}", price=10.0 * (i + 1))
            for i in range(count)
        ]
        test_db.add_all(products)
        await test_db.commit()
        return products
    return _seed


@pytest.fixture
def seed_articles(test_db):
    """Return an async helper inserting `count` articles for product 1."""
    async def _seed(count: int = 1) -> list[Article]:
        articles = [
            Article(product_id=1.0, article_name=f"Article {i}")
            for i in range(count)
        ]
        test_db.add_all(articles)
        await test_db.commit()
        return articles
    return _seed
