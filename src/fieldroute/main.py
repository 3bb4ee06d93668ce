"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import assistant, audit, health, inventory, orders, reports, routes, tickets, timesheet, users
from .config import settings
from .services.container import Services, build_services


def create_app(services: Services | None = None) -> FastAPI:
    app = FastAPI(title=settings.app_name)
    app.state.services = services if services is not None else build_services()

    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    for module in (health, orders, routes, users, tickets, timesheet, reports, inventory, audit, assistant):
        app.include_router(module.router, prefix=settings.api_prefix)
    return app
