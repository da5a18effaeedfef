"""
Newsdesk - Main FastAPI Application
"""

import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from newsdesk.core.config import settings
from newsdesk.core.database import init_db, close_db
from newsdesk.core.exceptions import setup_exception_handlers
from newsdesk.api.v1.api import api_router


logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)

# Create FastAPI app
app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="News publishing backend: authors, rubrics, tags and news",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    openapi_url="/openapi.json" if settings.ENVIRONMENT != "production" else None,
)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup exception handlers
setup_exception_handlers(app)

# Include API routers
app.include_router(api_router)


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info(f"Starting {settings.APP_NAME} API...")
    await init_db()
    logger.info("Application startup complete!")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info(f"Shutting down {settings.APP_NAME} API...")
    await close_db()


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "service": "newsdesk-api",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("newsdesk.main:app", host="0.0.0.0", port=8000)
