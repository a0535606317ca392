"""
DocSearch - FastAPI application for in-memory document search

Read-only HTTP API over a static corpus:
- TF-IDF and BM25 ranking (default chosen by SEARCH_ALGORITHM)
- Corpus loaded once at startup (bundled documents or CORPUS_PATH)
- No write endpoints: the index is never updated after startup
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from . import __version__
from .bootstrap import build_engine
from .config import Settings, load_env_files, load_settings
from .logging_config import setup_logging
from .ranking.engine import SearchEngine
from .ranking.scorer import ScoringAlgorithm

logger = logging.getLogger(__name__)

APP_VERSION = __version__


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    documents: int
    terms: int
    algorithm: str


class SearchRequest(BaseModel):
    query: str = Field(..., description="Free-text query (empty query returns no results)", max_length=10_000)
    top_k: Optional[int] = Field(default=None, ge=1, le=100, description="Number of results (default: SEARCH_LIMIT)")
    algorithm: Optional[str] = Field(
        default=None,
        description="Scoring algorithm: tfidf | bm25 (default: SEARCH_ALGORITHM)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "query": "quick brown fox",
                "top_k": 5,
                "algorithm": "bm25",
            }
        }
    )


class SearchResultItem(BaseModel):
    document_id: int
    content: str
    score: float


class SearchResponse(BaseModel):
    query: str
    algorithm: str
    results: List[SearchResultItem]
    total: int


class DocumentResponse(BaseModel):
    document_id: int
    content: str
    length: int = Field(..., description="Number of tokens")


def get_engine(request: Request) -> SearchEngine:
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Search engine not initialized",
        )
    return engine


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Explicit settings (tests). When None, settings are read from
            .env.local / .env / environment at startup and
            logging is configured from them.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the engine once, drop it on shutdown"""
        active_settings = settings
        if active_settings is None:
            load_env_files()
            active_settings = load_settings()
            # Served as module:app, so run() did not configure logging
            setup_logging(log_file=active_settings.log_file, console_level=active_settings.log_level)

        logger.info("Building search engine...")
        app.state.engine = build_engine(active_settings)
        app.state.started_at = datetime.now(timezone.utc)

        yield

        logger.info("Shutting down...")
        app.state.engine = None

    app = FastAPI(
        title="DocSearch API",
        description="In-memory document search with TF-IDF and BM25 ranking",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    @app.get("/", response_model=dict)
    async def root():
        """Root endpoint"""
        return {
            "service": "DocSearch API",
            "version": APP_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request, engine: SearchEngine = Depends(get_engine)):
        """Health check with index statistics"""
        started_at = request.app.state.started_at
        uptime = (datetime.now(timezone.utc) - started_at).total_seconds()

        return HealthResponse(
            status="healthy",
            version=APP_VERSION,
            started_at=started_at.isoformat().replace("+00:00", "Z"),
            uptime_seconds=round(uptime, 2),
            documents=len(engine.corpus),
            terms=len(engine.index),
            algorithm=engine.default_algorithm.value,
        )

    @app.post("/v1/search", response_model=SearchResponse)
    def search(request: SearchRequest, engine: SearchEngine = Depends(get_engine)):
        """
        Rank corpus documents against a free-text query.

        **Parameters:**
        - `query` (str): Whitespace-separated terms, case-insensitive
        - `top_k` (int): Maximum number of results (1-100, default: SEARCH_LIMIT)
        - `algorithm` (str): `tfidf` or `bm25` (default: SEARCH_ALGORITHM)

        **Notes:**
        - Terms match whole whitespace-delimited tokens, punctuation included
        - Empty or unmatched queries return an empty result list
        - Results are sorted by score descending, ties by document id
        """
        try:
            algorithm = (
                ScoringAlgorithm.parse(request.algorithm)
                if request.algorithm is not None
                else engine.default_algorithm
            )
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        results = engine.search(request.query, algorithm=algorithm, limit=request.top_k)

        logger.info(f"Search {request.query!r} ({algorithm.value}): {len(results)} results")

        return SearchResponse(
            query=request.query,
            algorithm=algorithm.value,
            results=[
                SearchResultItem(document_id=r.document_id, content=r.content, score=r.score)
                for r in results
            ],
            total=len(results),
        )

    @app.get("/v1/documents/{doc_id}", response_model=DocumentResponse)
    def get_document(doc_id: int, engine: SearchEngine = Depends(get_engine)):
        """Get a single corpus document by id"""
        if doc_id not in engine.corpus:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Document {doc_id} not found",
            )
        doc = engine.corpus.get(doc_id)
        return DocumentResponse(document_id=doc.id, content=doc.content, length=doc.length)

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Global exception handler"""
        logger.exception(f"Unhandled error on {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc),
            },
        )

    return app


app = create_app()


def run():
    """Start the HTTP service with uvicorn (docsearch-api entry point)"""
    import uvicorn

    load_env_files()
    settings = load_settings()
    setup_logging(log_file=settings.log_file, console_level=settings.log_level)

    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=settings.port,
        log_config=None,  # Keep our handlers
    )


if __name__ == "__main__":
    run()
