# SPDX-License-Identifier: Apache-2.0
"""Rate limiting, error rendering, sanitization, security middleware."""
from __future__ import annotations

import hashlib
import logging
import re
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from ceremony.core.exceptions import CeremonyError, InternalError, InvalidRequest, RateLimited

_logger = logging.getLogger("ceremony")


def get_limiter(app: FastAPI) -> Limiter:
    """The slowapi limiter owned by ``app``; limits are counted per app instance."""
    return app.state.limiter


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {error.get('msg', 'invalid')}" if loc else error.get("msg", "invalid"))
    return "; ".join(parts) or "invalid request"


def add_security_middleware(app: FastAPI, settings) -> None:
    """Register exception handlers, security headers, and CORS. No business logic."""
    app.state.limiter = Limiter(key_func=get_remote_address)

    @app.exception_handler(CeremonyError)
    async def ceremony_error_handler(request: Request, exc: CeremonyError):
        return JSONResponse(status_code=exc.http_status, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = InvalidRequest(_describe_validation_errors(exc))
        return JSONResponse(status_code=error.http_status, content=error.to_payload())

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        error = RateLimited(f"rate limit exceeded: {exc.detail}")
        return JSONResponse(status_code=error.http_status, content=error.to_payload())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())
        _logger.error("Unhandled exception %s: %s", error_id, exc, exc_info=True)
        error = InternalError("Internal server error")
        return JSONResponse(
            status_code=error.http_status,
            content={**error.to_payload(), "error_id": error_id},
        )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Content-Security-Policy"] = "default-src 'self'"
        response.headers["Cache-Control"] = "no-store"
        if settings.production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000"
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def sanitize_text(value: str, max_len: int = 2000) -> str:
    """Strip HTML/script tags, control characters, and enforce max length."""
    if not value:
        return ""
    value = re.sub(r"<[^>]+>", "", value)
    value = re.sub(r"javascript:", "", value, flags=re.IGNORECASE)
    value = "".join(c for c in value if c.isprintable())
    return value.strip()[:max_len]


def sha3_256_hex(*parts: bytes | str) -> str:
    """SHA3-256 hash of concatenated parts, hex-encoded."""
    h = hashlib.sha3_256()
    for p in parts:
        h.update(p.encode("utf-8") if isinstance(p, str) else p)
    return h.hexdigest()
