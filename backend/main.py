from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api import employees
from config.app_config import HOST, LOG_DIR, LOG_LEVEL, PORT
from constants import ServiceInfo
from database import engine
from init_db import init_database
from utils.logging_utils import clear_logging_context, configure_logging, set_logging_context

LOG_FILE = configure_logging(LOG_DIR, LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Preparing database schema...")
    await init_database()
    logger.info("Application startup complete")

    yield

    logger.info("Disposing database connections...")
    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=ServiceInfo.NAME,
    description=ServiceInfo.DESCRIPTION,
    version=ServiceInfo.VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_context_middleware(request: Request, call_next):
    """Tag every log line emitted while serving a request with its method and path"""
    set_logging_context(method=request.method, path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_logging_context()


app.include_router(employees.router)


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": ServiceInfo.NAME,
        "version": ServiceInfo.VERSION
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting {ServiceInfo.NAME} on http://{HOST}:{PORT}...")
    uvicorn.run(app, host=HOST, port=PORT)
