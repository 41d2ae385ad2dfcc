"""FastAPI layer that exposes add/get/search operations."""
from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Query as FastAPIQuery, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from application.use_cases.add_document import add_document
from application.use_cases.get_document import get_document
from application.use_cases.search import search_documents
from domain.errors import DocumentNotFoundError, InternalError, InvalidDocumentError, InvalidQueryError
from infrastructure.config import Container, build_default_container

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class AddResponse(BaseModel):
    id: str


class HitPayload(BaseModel):
    id: str
    document: dict[str, Any]


class SearchResponse(BaseModel):
    documents: list[HitPayload]
    count: int


def _error(status_code: int, message: str | None = None) -> JSONResponse:
    body = {"error": message} if message else {}
    return JSONResponse(status_code=status_code, content=body)


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API around ``container`` (a fresh default one when omitted)."""

    container = container or build_default_container()

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        container.start()
        try:
            yield
        finally:
            container.close()

    # /docs belongs to the document routes, so the Swagger UI moves.
    app = FastAPI(title="DocDB API", lifespan=lifespan, docs_url="/api-docs", redoc_url=None)
    app.state.container = container

    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        logger.info("(id=%s) Request: %s %s", request_id, request.method, request.url.path)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info("(id=%s) Response: %s", request_id, response.status_code)
        return response

    @app.exception_handler(InvalidQueryError)
    async def invalid_query_handler(request: Request, exc: InvalidQueryError) -> JSONResponse:
        logger.info("(id=%s) Invalid query: %s", getattr(request.state, "request_id", "-"), exc)
        return _error(400, str(exc))

    @app.exception_handler(InvalidDocumentError)
    async def invalid_document_handler(_request: Request, exc: InvalidDocumentError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(DocumentNotFoundError)
    async def not_found_handler(_request: Request, exc: DocumentNotFoundError) -> JSONResponse:
        return _error(404, str(exc))

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
        logger.error("(id=%s) Internal error: %s", getattr(request.state, "request_id", "-"), exc)
        return _error(500)

    @app.get("/")
    def root_endpoint() -> dict[str, Any]:
        return {}

    @app.post("/docs", status_code=201, response_model=AddResponse)
    async def add_endpoint(request: Request) -> AddResponse:
        try:
            payload = await request.json()
        except (ValueError, RecursionError) as exc:
            raise InvalidDocumentError(f"request body is not valid JSON: {exc}") from exc
        document_id = add_document(
            payload,
            document_store=container.document_store,
            index_store=container.index_store,
        )
        return AddResponse(id=document_id)

    @app.get("/docs", response_model=SearchResponse)
    def search_endpoint(q: str = FastAPIQuery("", description="Document query")) -> SearchResponse | Response:
        hits = search_documents(
            q,
            document_store=container.document_store,
            index_store=container.index_store,
        )
        if not hits:
            return Response(status_code=404)
        documents = [HitPayload(id=hit.id, document=hit.document) for hit in hits]
        return SearchResponse(documents=documents, count=len(documents))

    @app.get("/docs/{document_id}")
    def get_endpoint(document_id: str) -> dict[str, Any]:
        return get_document(document_id, document_store=container.document_store)

    return app


def __getattr__(name: str) -> FastAPI:
    # Built on first access so importing create_app does not create a container.
    if name == "app":
        application = create_app()
        globals()["app"] = application
        return application
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
