import logging
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect

from articles_api.config import get_settings
from articles_api.models import Article
from articles_api.schemas import ArticleCreate, ArticleOut
from articles_api.search import search_articles
from articles_api.store import ArticleStore, generate_article_id, seed_demo_article

logger = logging.getLogger(__name__)

# Starlette routes need an explicit method list; verbs outside it get a 405.
ANY_METHOD = [
    "GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "TRACE", "CONNECT",
]


def get_store(request: Request) -> ArticleStore:
    return request.app.state.store


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return Response(status_code=404, headers=exc.headers)
    if exc.status_code == 405:
        return PlainTextResponse(
            "method not allowed", status_code=405, headers=exc.headers
        )
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return PlainTextResponse(str(exc), status_code=500)


def create_app(store: Optional[ArticleStore] = None) -> FastAPI:
    """Build the articles application around ``store``.

    A fresh, empty store is used when none is given.
    """
    app = FastAPI(redirect_slashes=False)
    app.state.store = store if store is not None else ArticleStore()
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/articles", response_model=List[ArticleOut])
    def list_articles(store: ArticleStore = Depends(get_store)):
        return store.get_all()

    @app.post("/articles")
    async def create_article(request: Request, store: ArticleStore = Depends(get_store)):
        try:
            body = await request.body()
        except ClientDisconnect as e:
            logger.warning("Failed to read article body: %r", e)
            raise HTTPException(status_code=500, detail=str(e) or "client disconnected")

        content_type = request.headers.get("content-type", "")
        if content_type != "application/json":
            logger.warning("Rejected article with content-type %r", content_type)
            raise HTTPException(
                status_code=415,
                detail=f"need content-type 'application/json', but got '{content_type}'",
            )

        try:
            article_in = ArticleCreate.model_validate_json(body)
        except ValidationError as e:
            logger.warning("Rejected malformed article body: %s", e)
            raise HTTPException(status_code=400, detail=str(e))

        article = Article(id=generate_article_id(), **article_in.model_dump())
        store.insert(article)
        logger.info("Created article id=%s", article.id)
        return Response(status_code=200)

    # Registered before /articles/{article_id} so "search" is never taken as an id.
    @app.api_route("/articles/search", methods=ANY_METHOD, response_model=List[ArticleOut])
    def search(request: Request, store: ArticleStore = Depends(get_store)):
        # first q wins when the parameter is repeated
        values = request.query_params.getlist("q")
        q = values[0] if values else ""
        return search_articles(store.get_all(), q)

    @app.api_route("/articles/{article_id}", methods=ANY_METHOD, response_model=ArticleOut)
    def get_article(article_id: str, store: ArticleStore = Depends(get_store)):
        article = store.get_by_id(article_id)
        if article is None:
            raise HTTPException(status_code=404)
        return article

    return app


def build_default_app() -> FastAPI:
    settings = get_settings()
    store = ArticleStore()
    if settings.seed_demo:
        seed_demo_article(store)
    return create_app(store)


app = build_default_app()


def run():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting articles API on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "articles_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
