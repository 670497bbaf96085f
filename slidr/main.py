import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .database.database import create_tables
from .exceptions import register_exception_handlers
from .routers import auth, project

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info("--- SLIDR BACKEND STARTED ON PORT %s ---", config.PORT)
    yield


def create_app() -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(title="Slidr API", version="1.0.0", lifespan=lifespan)

    # Configuration CORS (serveurs de dev Vite)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api")
    app.include_router(project.router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "Slidr API is running", "status": "ok"}

    return app


app = create_app()
