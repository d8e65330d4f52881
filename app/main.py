import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import dashboard_api
from app.schemas import HealthResponse, MessageResponse
from app.services.store import RecordStore

log = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    root = logging.getLogger()
    if root.handlers:
        # Already configured (uvicorn, pytest).
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Filtering, KPIs and insights over in-memory sales records",
        version=settings.APP_VERSION,
    )
    app.state.store = store if store is not None else RecordStore.from_settings(settings)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            log.info("%s %s %d %.1fms", request.method, request.url.path, status_code, elapsed_ms)

    app.include_router(dashboard_api.router)

    @app.get("/", response_model=MessageResponse)
    def root():
        return {"success": True, "message": "Dashboard backend running"}

    @app.get("/health", response_model=HealthResponse)
    def health_check(request: Request):
        return {"status": "ok", "version": settings.APP_VERSION, "records": len(request.app.state.store)}

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and unsupported methods on known paths look the same to clients.
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"success": False, "message": "Endpoint not found"})
        return JSONResponse(status_code=exc.status_code, content={"success": False, "message": str(exc.detail)})

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        log.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"success": False, "message": "Server error"})

    log.info("%s ready with %d records", settings.APP_NAME, len(app.state.store))
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
