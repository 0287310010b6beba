"""
FastAPI application initialization
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api.middleware import RequestContextMiddleware
from api.routes import admin, health, nodes
from core.config import Settings, settings as default_settings
from core.context import build_context
from core.database import init_db
from core.logging import setup_logging
from ingestion.scheduler import NodeImportScheduler

logger = logging.getLogger(__name__)


def _database_label(url: str) -> str:
    """Database URL without credentials, for logging"""
    return url.split("@")[1] if "@" in url else url


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the application around one shared context and scheduler"""
    config = config or default_settings
    context = build_context(config)
    scheduler = NodeImportScheduler(context, interval_seconds=config.IMPORT_INTERVAL_SECONDS)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Lightning Node Sync API")
        logger.info(f"Environment: {config.ENVIRONMENT}")
        logger.info(f"Database: {_database_label(config.DATABASE_URL)}")
        
        await init_db(context.engine)
        if config.SCHEDULER_ENABLED:
            scheduler.start()
        
        yield
        
        logger.info("Shutting down Lightning Node Sync API")
        await scheduler.stop()
        await context.engine.dispose()
    
    app = FastAPI(
        title="Lightning Node Sync API",
        description="Imports Lightning node rankings and serves them over HTTP",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.context = context
    app.state.scheduler = scheduler
    
    app.add_middleware(RequestContextMiddleware)
    
    app.include_router(health.router)
    app.include_router(nodes.router)
    app.include_router(admin.router)
    
    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "Lightning Node Sync API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "nodes": "/nodes",
                "import": "/admin/import"
            }
        }
    
    return app


setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(app, host=default_settings.API_HOST, port=default_settings.API_PORT)
