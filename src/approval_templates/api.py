"""
FastAPI application factory for the template resolution router.
"""
from typing import Optional

import structlog
from fastapi import FastAPI

from . import __version__
from .config import AppConfig, get_config
from .logging_setup import configure_logging
from .registry import get_template_registry
from .router import router

logger = structlog.get_logger()


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or get_config()
    configure_logging(config.log)

    app = FastAPI(
        title=config.api.title,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.include_router(router, prefix=config.api.prefix)

    # Build the registry up front so table errors surface at startup
    registry = get_template_registry()
    logger.info("Template API configured", prefix=config.api.prefix, templates=len(registry))
    return app
