"""FastAPI application entry point."""
from __future__ import annotations

from fastapi import FastAPI

from timezone_parameter.config.settings import get_settings
from timezone_parameter.utils.logging import setup_logging
from .api import parameters as parameter_routes

settings = get_settings()
setup_logging()

app = FastAPI(title=settings.app_name)
app.include_router(parameter_routes.router)


@app.get("/health")
def healthcheck() -> dict:
    return {"status": "ok", "environment": settings.environment}
