"""FastAPI application entrypoint for tocfilter service mode."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel, Field

from ..models import TocOptions
from ..orchestrator import Orchestrator


class RenderOptions(BaseModel):
    min_level: Optional[int] = Field(default=None, ge=1, le=6)
    max_level: Optional[int] = Field(default=None, ge=1, le=6)
    chapter_numbers: Optional[bool] = None
    prefix: Optional[str] = None
    heading_ids: Optional[bool] = None


class RenderRequest(BaseModel):
    text: str
    options: Optional[RenderOptions] = None


class RenderResponse(BaseModel):
    text: str
    changed: bool


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing tocfilter rendering."""

    app = FastAPI(title="tocfilter Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # Fresh per request so no state leaks between documents.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/render", response_model=RenderResponse)
    async def render(
        payload: RenderRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> RenderResponse:
        options: TocOptions = orchestrator.defaults
        if payload.options is not None:
            options = options.merged(**payload.options.model_dump())

        def _run_render() -> str:
            return orchestrator.render(payload.text, options)

        loop = asyncio.get_running_loop()
        rendered = await loop.run_in_executor(None, _run_render)
        return RenderResponse(text=rendered, changed=rendered != payload.text)

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
