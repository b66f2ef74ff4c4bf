"""Article Routes: CRUD endpoints on /articles and /article/{id}.

Mirrors the product routes; not-found and bad-id messages name "Article".
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.params import Page, page_params, parse_record_id
from catalog.core.errors import InvalidRequestError
from catalog.infrastructure.database import get_db
from catalog.models.article import Article
from catalog.repositories import articles as article_repository
from catalog.schemas.article import (
    ArticleCreate, ArticleResponse, ArticleUpdate,
)
from catalog.schemas.common import ErrorResponse, ResultResponse

logger = logging.getLogger(__name__)
router = APIRouter(
    tags=["articles"],
    responses={400: {"model": ErrorResponse}},
)


def article_id_param(article_id: str = Path()) -> int:
    return parse_record_id(article_id, "Article")


@router.api_route(
    "/article/", methods=["GET", "PUT", "DELETE"], include_in_schema=False,
)
@router.api_route(
    "/article", methods=["GET", "PUT", "DELETE"], include_in_schema=False,
)
async def missing_article_id():
    raise InvalidRequestError("Invalid article ID", field="id")


@router.get("/articles", response_model=list[ArticleResponse])
async def list_articles(
    page: Page = Depends(page_params), db: AsyncSession = Depends(get_db),
):
    articles = await article_repository.list_articles(
        db, page.offset, page.limit,
    )
    return [ArticleResponse.model_validate(a) for a in articles]


@router.get(
    "/article/{article_id}", response_model=ArticleResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_article(
    record_id: int = Depends(article_id_param),
    db: AsyncSession = Depends(get_db),
):
    article = await article_repository.get_article(db, record_id)
    return ArticleResponse.model_validate(article)


@router.post(
    "/article", response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_article(
    body: ArticleCreate, db: AsyncSession = Depends(get_db),
):
    """Create an article. product_ID is stored as given, never checked."""
    article = await article_repository.create_article(
        db, Article(product_id=body.product_id, article_name=body.article_name),
    )
    logger.info(
        "Article created", extra={"entity": "article", "record_id": article.id},
    )
    return ArticleResponse.model_validate(article)


@router.put("/article/{article_id}", response_model=ArticleResponse)
async def update_article(
    body: ArticleUpdate,
    record_id: int = Depends(article_id_param),
    db: AsyncSession = Depends(get_db),
):
    article = await article_repository.update_article(
        db,
        Article(
            id=record_id,
            product_id=body.product_id,
            article_name=body.article_name,
        ),
    )
    return ArticleResponse.model_validate(article)


@router.delete("/article/{article_id}", response_model=ResultResponse)
async def delete_article(
    record_id: int = Depends(article_id_param),
    db: AsyncSession = Depends(get_db),
):
    await article_repository.delete_article(db, record_id)
    logger.info(
        "Article deleted", extra={"entity": "article", "record_id": record_id},
    )
    return ResultResponse()
