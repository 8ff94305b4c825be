from __future__ import annotations

import asyncio
import random

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from . import __version__
from .api_models import VersionResponse, WorkResponse
from .faults import FaultInjector
from .pages import render_status_page
from .settings import Settings, load_settings

INTERNAL_ERROR = "Internal Server Error"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_injector(request: Request) -> FaultInjector:
    return request.app.state.injector


def _failure() -> PlainTextResponse:
    return PlainTextResponse(INTERNAL_ERROR, status_code=500)


def create_app(settings: Settings | None = None, rng: random.Random | None = None) -> FastAPI:
    """Build the service for one resolved configuration.

    Settings are read once here; handlers only ever see this instance.
    """
    settings = settings or load_settings()

    app = FastAPI(title=f"Canary Simulator {settings.version}", version=__version__)
    app.state.settings = settings
    app.state.injector = FaultInjector(settings.error_rate, rng=rng)

    if settings.status_page:

        @app.get("/", response_class=HTMLResponse)
        def status_page(cfg: Settings = Depends(get_settings)) -> str:
            return render_status_page(cfg)

    @app.get("/version", response_model=VersionResponse)
    def version(cfg: Settings = Depends(get_settings)) -> VersionResponse:
        return VersionResponse(version=cfg.version, status="healthy")

    @app.get("/health", response_class=PlainTextResponse)
    def health(faults: FaultInjector = Depends(get_injector)):
        if faults.should_fail("/health"):
            return _failure()
        return PlainTextResponse("OK")

    @app.get("/work", response_model=WorkResponse)
    async def work(
        cfg: Settings = Depends(get_settings),
        faults: FaultInjector = Depends(get_injector),
    ):
        # Suspends only this request.
        await asyncio.sleep(cfg.latency_ms / 1000.0)
        if faults.should_fail("/work"):
            return _failure()
        return WorkResponse(version=cfg.version, processed=True, latency_ms=cfg.latency_ms)

    return app
