"""
Blog Posts API

In-memory CRUD service for blog posts with pagination and search.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog_api.config import get_settings
from blog_api.dependencies import get_repository
from blog_api.logging_config import setup_logging
from blog_api.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from blog_api.models.response import ApiResult
from blog_api.routers import posts

logger = logging.getLogger(__name__)

settings = get_settings()
setup_logging(settings.log_level)

SERVICE_NAME = "blog-posts-api"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: build the repository before the first request."""
    repo = get_repository()
    logger.info("Blog API started with %d posts", repo.count())
    yield


app = FastAPI(
    title="Blog Posts API",
    description="CRUD API for blog posts with pagination and search",
    version=VERSION,
    debug=settings.debug,
    lifespan=lifespan,
)

# Security headers (innermost), then request ID (outermost)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Routers
app.include_router(posts.router, prefix=settings.api_prefix)


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable or mistyped bodies as a 400 envelope."""
    logger.warning("Invalid request body for %s: %s", request.url.path, exc.errors())
    result = ApiResult[Any].error(["Invalid request body"])
    return JSONResponse(content=result.to_json_dict(), status_code=400)


def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    s = get_settings()
    post_count = get_repository().count()
    checks = {
        "config": "ok" if s.api_prefix.startswith("/") else "fail",
        "repository": "ok",
    }

    failed = [k for k, v in checks.items() if v != "ok"]
    if failed:
        overall = "degraded"
        logger.warning("Health check degraded, failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    return {
        "status": overall,
        "service": SERVICE_NAME,
        "version": VERSION,
        "checks": checks,
        "posts": post_count,
    }


@app.get(f"{settings.api_prefix}/health")
async def health_check() -> JSONResponse:
    """Health check verifying configuration and the post store."""
    return JSONResponse(content=_run_health_checks(), status_code=200)
