"""
FastAPI application factory
"""

import logging
from typing import Callable

from fastapi import FastAPI

from .endpoints.form_access import router as form_access_router
from ..core.config import API_CONFIG
from ..core.form_access import FormAccessConfig
from ..core.loader import get_form_access

logger = logging.getLogger(__name__)


def create_app(config_loader: Callable[[], FormAccessConfig] = get_form_access) -> FastAPI:
    """Create the status API; config_loader supplies the FormAccessConfig per request"""
    app = FastAPI(
        title=API_CONFIG['title'],
        description="Status API untuk konfigurasi akses Record Teamwork form",
        version=API_CONFIG['version'],
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.config_loader = config_loader

    app.include_router(form_access_router)

    @app.get("/")
    async def root():
        """Root endpoint dengan informasi API"""
        return {
            "message": API_CONFIG['title'],
            "version": API_CONFIG['version'],
            "docs": "/docs",
            "endpoints": {
                "GET /form-access/status": "Which form access keys are configured",
                "GET /health": "Health check"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": API_CONFIG['title']}

    return app
