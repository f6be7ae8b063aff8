from fastapi import FastAPI
from contextlib import asynccontextmanager

from .routes import router
from .. import __version__
from ..core.registry import PluginRegistry


@asynccontextmanager
async def lifespan(app: FastAPI):
    PluginRegistry.discover_generators()  # built-ins plus any modules added to prngseq.generators
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="prngseq",
        description="Deterministic pseudo-random number sequences",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(router)

    return app


app = create_app()
