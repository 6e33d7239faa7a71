"""Application entrypoint for the billing API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.v1.router import get_api_router
from app.core.config import get_config
from app.core.startup import bootstrap


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    bootstrap()
    yield


def create_app(run_bootstrap: bool = True) -> FastAPI:
    """Create the FastAPI application."""
    cfg = get_config()
    app = FastAPI(
        title=cfg.APP_NAME,
        version=cfg.APP_VERSION,
        lifespan=lifespan if run_bootstrap else None,
    )
    app.include_router(get_api_router())

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn app.main:app`.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    cfg = get_config()
    uvicorn.run("app.main:app", host=cfg.API_HOST, port=cfg.API_PORT)
