import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from config import Settings
from context import RequestContextMiddleware
from graph import create_graphql_router
from routes.auth import router as auth_router
from routes.rest import router as rest_router
from services.dataset import load_dataset
from services.store import DatasetStore
from services.tokens import TokenService
from utils.log_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[DatasetStore] = None) -> FastAPI:
    """
    Build the application.

    When no store is given the dataset is loaded from settings.dataset_path at startup.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Load the dataset once, before serving
        if getattr(app.state, "store", None) is None:
            app.state.store = load_dataset(settings.dataset_path)

        logger.info("REST API at /rest, GraphQL API at /graphql, POST /login for a token")
        yield

    app = FastAPI(lifespan=lifespan)

    app.state.token_service = TokenService(settings.jwt_secret, ttl_seconds=settings.token_ttl_seconds)
    app.state.store = store

    # middleware to set request context
    app.add_middleware(RequestContextMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    graphql_ide = None if settings.graphql_ide.lower() == "none" else settings.graphql_ide

    # Include routers
    app.include_router(auth_router, tags=["auth"])
    app.include_router(rest_router, prefix="/rest", tags=["rest"])
    app.include_router(create_graphql_router(graphql_ide), prefix="/graphql", tags=["graphql"])

    return app


app = create_app()
