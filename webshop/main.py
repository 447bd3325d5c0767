"""
Web Shop - Backend API
REST access to the in-memory shop data store
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from webshop.api import categories, customers
from webshop.bootstrap import build_repository
from webshop.core.config import Settings, settings as default_settings
from webshop.core.exceptions import EntityNotFoundError, StoreNotReadyError
from webshop.repositories.shop_repository import ShopRepository


def create_app(
    repository: Optional[ShopRepository] = None,
    settings: Optional[Settings] = None
) -> FastAPI:
    """
    Build the FastAPI application around a repository

    Args:
        repository: Repository to serve (built from settings if omitted)
        settings: Settings to use (module settings if omitted)
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION
    )
    app.state.repository = repository if repository is not None else build_repository(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreNotReadyError)
    async def store_not_ready_handler(request: Request, exc: StoreNotReadyError):
        return JSONResponse(status_code=503, content={"status": "error", "detail": exc.message})

    @app.exception_handler(EntityNotFoundError)
    async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(status_code=404, content={"status": "error", "detail": exc.message})

    app.include_router(categories.router, prefix="/api/v1/categories", tags=["Categories"])
    app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])

    @app.get("/")
    async def root():
        """Root endpoint - API status"""
        return {
            "message": "Web Shop API",
            "status": "online",
            "version": settings.API_VERSION
        }

    @app.get("/health")
    async def health(request: Request):
        """Health check - reports whether shop data is loaded"""
        ready = request.app.state.repository.is_ready
        return {
            "status": "healthy" if ready else "degraded",
            "service": "webshop-api",
            "version": settings.API_VERSION,
            "data_loaded": ready
        }

    return app


app = create_app()
