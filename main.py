import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.v1.routers import router as api_router
from taskboard.core.config import settings
from taskboard.core.database import engine, init_db, seed_db
from taskboard.core.errors import register_exception_handlers
from taskboard.core.logging_config import setup_logging

logger = logging.getLogger("taskboard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code here
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting up %s...", settings.APP_NAME)
    # init database (create tables), unless alembic owns the schema
    if not settings.SKIP_DB_INIT:
        init_db()

    # seed an empty database with sample data (development only)
    if settings.SEED_DB:
        seed_db()

    yield
    # Shutdown code here
    engine.dispose()
    logger.info("Shutting down %s...", settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %d %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.get("/")
def health_check():
    return {"status": "ok"}


app.include_router(
    prefix="/api",
    router=api_router,
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
