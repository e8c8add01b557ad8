"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from .routes import simplejson


def create_fastapi_app(application: Application) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Jaeger SimpleJSON",
        description="Jaeger traces as a Grafana SimpleJSON datasource",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Grafana may query the datasource directly from the browser
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(simplejson.create_simplejson_router(application))

    return fastapi_app
