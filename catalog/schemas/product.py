"""Product Schemas: request body and response shape for /product and /products."""

from pydantic import BaseModel, ConfigDict


class ProductCreate(BaseModel):
    """Body of POST /product and PUT /product/{id}. No str-to-number coercion."""
    model_config = ConfigDict(strict=True)

    name: str
    price: float = 0.0


class ProductUpdate(ProductCreate):
    """Full replacement: every mutable field is overwritten."""
    pass


class ProductResponse(BaseModel):
    """Public product representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
