"""FastAPI application entrypoint.

This module builds the application, configures logging and the request
context middleware, and mounts the two route groups. Controllers are
intentionally thin: they delegate to a service or repository and return
JSON responses.

Endpoints implemented:
- GET /clientes
- GET /clientes/{id}
- POST /clientes
- DELETE /clientes/{id}
- GET /produtos
- POST /produtos
- GET /health
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import json
import logging
import time
import uuid
from .database import create_db_and_tables
from .routers import clients, products
from .config import settings

app = FastAPI(title="Estudos API")
logger = logging.getLogger("estudos_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS keeps local HTML testers working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()

app.include_router(clients.router)
app.include_router(products.router)


def _request_summary(request: Request, req_id: str, started: float, **extra) -> str:
    """JSON line describing one handled request, for the access log."""
    summary = {
        "request_id": req_id,
        "method": request.method,
        "path": request.url.path,
        "client": request.client.host if request.client else "unknown",
        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
    }
    summary.update(extra)
    return json.dumps(summary, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Tag every request with an `X-Request-ID` and log its outcome.

    An incoming `X-Request-ID` header is reused; otherwise a fresh hex id
    is generated. Failures are logged and re-raised untouched.
    """
    req_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    request.state.request_id = req_id
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_failed %s", _request_summary(request, req_id, started))
        raise
    response.headers["X-Request-ID"] = req_id
    logger.info(
        "request_done %s",
        _request_summary(request, req_id, started, status_code=response.status_code),
    )
    return response


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
