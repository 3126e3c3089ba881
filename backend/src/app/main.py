from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..api.routes import dashboard, state, stations
from ..config import catalog_seed, cors_origins, log_level
from ..core.catalog import build_catalog
from ..services.prediction_service import PredictionGateway
from .controller import DashboardController

logger = logging.getLogger(__name__)

ControllerFactory = Callable[[], DashboardController]


def default_controller() -> DashboardController:
    return DashboardController(
        catalog=build_catalog(random.Random(catalog_seed())),
        prediction_gateway=PredictionGateway(),
    )


def create_app(
    controller_factory: ControllerFactory = default_controller,
    load_realtime_on_startup: bool = True,
) -> FastAPI:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        controller = controller_factory()
        app.state.controller = controller
        task: asyncio.Task[object] | None = None
        if load_realtime_on_startup:
            task = asyncio.create_task(asyncio.to_thread(controller.load_realtime))
        logger.info("Dashboard ready with %d stations", len(controller.catalog))
        try:
            yield
        finally:
            if task is not None and not task.done():
                await task
            logger.info("Dashboard shut down")

    app = FastAPI(title="Belfast Bikes Predictor API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(stations.router)
    app.include_router(state.router)
    app.include_router(dashboard.router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": "ok", "service": "bikecast-backend"}

    return app


app = create_app()
