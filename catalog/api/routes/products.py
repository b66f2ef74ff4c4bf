"""Product Routes: CRUD endpoints on /products and /product/{id}.

Invariants:
    - GET /products always answers with a JSON array (possibly [])
    - Unknown id on GET -> 404 {"error": "Product not found"}
    - PUT and DELETE on an unknown id succeed without touching any row
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.params import Page, page_params, parse_record_id
from catalog.core.errors import InvalidRequestError
from catalog.infrastructure.database import get_db
from catalog.models.product import Product
from catalog.repositories import products as product_repository
from catalog.schemas.common import ErrorResponse, ResultResponse
from catalog.schemas.product import (
    ProductCreate, ProductResponse, ProductUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(
    tags=["products"],
    responses={400: {"model": ErrorResponse}},
)


def product_id_param(product_id: str = Path()) -> int:
    return parse_record_id(product_id, "Product")


@router.api_route(
    "/product/", methods=["GET", "PUT", "DELETE"], include_in_schema=False,
)
@router.api_route(
    "/product", methods=["GET", "PUT", "DELETE"], include_in_schema=False,
)
async def missing_product_id():
    """Item routes called without an id."""
    raise InvalidRequestError("Invalid product ID", field="id")


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    page: Page = Depends(page_params), db: AsyncSession = Depends(get_db),
):
    """List products ordered by id, paged by ?start=&count=."""
    products = await product_repository.list_products(
        db, page.offset, page.limit,
    )
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/product/{product_id}", response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(
    record_id: int = Depends(product_id_param),
    db: AsyncSession = Depends(get_db),
):
    product = await product_repository.get_product(db, record_id)
    return ProductResponse.model_validate(product)


@router.post(
    "/product", response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate, db: AsyncSession = Depends(get_db),
):
    """Create a product; the response carries the assigned id."""
    product = await product_repository.create_product(
        db, Product(name=body.name, price=body.price),
    )
    logger.info(
        "Product created", extra={"entity": "product", "record_id": product.id},
    )
    return ProductResponse.model_validate(product)


@router.put("/product/{product_id}", response_model=ProductResponse)
async def update_product(
    body: ProductUpdate,
    record_id: int = Depends(product_id_param),
    db: AsyncSession = Depends(get_db),
):
    """Overwrite name and price; the id always comes from the path."""
    product = await product_repository.update_product(
        db, Product(id=record_id, name=body.name, price=body.price),
    )
    return ProductResponse.model_validate(product)


@router.delete("/product/{product_id}", response_model=ResultResponse)
async def delete_product(
    record_id: int = Depends(product_id_param),
    db: AsyncSession = Depends(get_db),
):
    await product_repository.delete_product(db, record_id)
    logger.info(
        "Product deleted", extra={"entity": "product", "record_id": record_id},
    )
    return ResultResponse()
