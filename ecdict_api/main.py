from __future__ import annotations
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .config import Settings
from .dictionary import DictionaryService
from .errors import LookupFailure, error_envelope, status_for
from .managers.pool import ConnectionPool
from .metrics import LookupMetrics
from .routers.lookup import router as lookup_router

logger = logging.getLogger(__name__)

BANNER = 'REST API FOR ECDICT'

def create_app(settings: Optional[Settings] = None, metrics: Optional[LookupMetrics] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    metrics = metrics or LookupMetrics()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        pool = ConnectionPool(settings.db_path, max_connections=settings.pool_size)
        try:
            await pool.open()
        except Exception:
            logger.exception(f"Cannot open dictionary store {settings.db_path}")
            raise
        app.state.pool = pool
        app.state.dictionary = DictionaryService(pool)
        try:
            yield
        finally:
            await pool.close()

    app = FastAPI(title="ECDICT REST API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.metrics = metrics

    # CORS for browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=['GET'],
        allow_headers=['*'],
    )

    @app.middleware('http')
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start_time
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {elapsed * 1000:.1f}ms")
        return response

    @app.exception_handler(LookupFailure)
    async def lookup_failure_handler(request: Request, exc: LookupFailure):
        return JSONResponse(status_code=status_for(exc), content=error_envelope(exc).model_dump())

    @app.get('/', response_class=PlainTextResponse)
    async def index() -> str:
        return BANNER

    @app.get('/metrics')
    async def export_metrics(request: Request):
        body, content_type = request.app.state.metrics.render()
        return Response(content=body, media_type=content_type)

    app.include_router(lookup_router)
    return app

def serve() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())

# Export ASGI app for uvicorn
application = create_app()

# For local running: uvicorn ecdict_api.main:application --host 0.0.0.0 --port 8000
