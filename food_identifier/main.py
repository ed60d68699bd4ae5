import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes.analyze_food import router as analyze_food_router
from .services.food_analyzer import FoodAnalyzerService
from .services.vision_client import build_vision_client
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.api_key:
            logger.warning(
                "%s is not set. Food analysis functionality will not work.",
                settings.api_key_name,
            )
        client = build_vision_client(settings)
        app.state.food_analyzer = FoodAnalyzerService(settings, client)
        yield
        close = getattr(client, "close", None)
        if close is not None:
            await close()

    app = FastAPI(
        title="Food Identifier",
        version="0.1.0",
        description="Identify ingredients, allergens and dietary flags in a food photo.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "food-identifier"}

    app.include_router(analyze_food_router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "food_identifier.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
