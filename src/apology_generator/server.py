from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apology_generator import __version__
from apology_generator.config import GeneratorConfig
from apology_generator.dependencies import set_config
from apology_generator.log_config import logger, setup_logger
from apology_generator.routes import apology, health, pages


def create_app(config: GeneratorConfig) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Generator configuration

    Returns:
        Configured FastAPI application

    """
    setup_logger(config.log_level.upper())
    set_config(config)

    if not config.resolved_api_key():
        logger.warning("Starting without an API key; the generator will report a configuration error")

    app = FastAPI(
        title="apology-generator",
        description="Free AI apology generator: static pages plus a single generation endpoint",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(pages.router)
    app.include_router(apology.router)
    app.include_router(health.router)

    return app
