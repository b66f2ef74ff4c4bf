"""Health probes and global error handling.

Invariants:
    - /health/ is always 200; /health/ready is 503 without a database
    - Every non-2xx body is {"error": "<message>"}, routing errors included
    - SQLAlchemy failures inside a request surface as 500 {"error": "Database error"}
"""

import pytest
from sqlalchemy import text

import catalog.infrastructure.database as db_module
from catalog.core.errors import DatabaseError


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    body = res.json()
    assert body["error"] == "Database unavailable"
    assert body["checks"] == {"database": "not_initialized"}


async def test_database_error_returns_500_envelope(client, monkeypatch):
    async def _broken(db, offset, limit):
        raise DatabaseError("Connection or operational error", "execute")

    monkeypatch.setattr(
        "catalog.repositories.products.list_products", _broken,
    )
    res = await client.get("/products")
    assert res.status_code == 500
    assert res.json() == {"error": "Database error"}


async def test_sqlalchemy_error_in_request_is_mapped_by_session(client, manager):
    async with manager.engine.begin() as conn:
        await conn.execute(text("DROP TABLE products"))

    res = await client.get("/products")
    assert res.status_code == 500
    assert res.json() == {"error": "Database error"}


async def test_unknown_path_returns_404_envelope(client):
    res = await client.get("/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


@pytest.mark.parametrize("path", ["/product/1", "/article/1", "/products"])
async def test_unsupported_method_returns_405_envelope(client, path):
    res = await client.patch(path, json={})
    assert res.status_code == 405
    assert res.json() == {"error": "Method Not Allowed"}
    assert "allow" in res.headers


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
@pytest.mark.parametrize(
    "path, message",
    [
        ("/product/", "Invalid product ID"),
        ("/product", "Invalid product ID"),
        ("/article/", "Invalid article ID"),
        ("/article", "Invalid article ID"),
    ],
)
async def test_missing_id_returns_400(client, method, path, message):
    res = await client.request(method, path)
    assert res.status_code == 400
    assert res.json() == {"error": message}
