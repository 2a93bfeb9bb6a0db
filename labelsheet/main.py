import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from labelsheet import __version__
from labelsheet.core.config import Settings, get_settings
from labelsheet.core.container import ApplicationContainer
from labelsheet.interfaces.http import create_api_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = ApplicationContainer.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.init_infrastructure()
        yield
        await container.dispose()

    app = FastAPI(
        title=settings.project_name,
        description="Label sheet template manager",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
