"""Article Schemas: request body and response shape for /article and /articles.

Invariants:
    - product_ID is the wire name; product_id is accepted on input too
    - product_id defaults to 1.0, matching the column default
    - Request bodies are strict: numbers must be JSON numbers, names JSON strings
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

_PRODUCT_ID_FIELD = dict(
    validation_alias=AliasChoices("product_ID", "product_id"),
    serialization_alias="product_ID",
)


class ArticleCreate(BaseModel):
    """Body of POST /article and PUT /article/{id}."""
    model_config = ConfigDict(strict=True)

    product_id: float = Field(1.0, **_PRODUCT_ID_FIELD)
    article_name: str


class ArticleUpdate(ArticleCreate):
    """Full replacement: every mutable field is overwritten."""
    pass


class ArticleResponse(BaseModel):
    """Public article representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: float = Field(**_PRODUCT_ID_FIELD)
    article_name: str
