"""
Shorts Forge - Main Application
FastAPI application for generating YouTube Shorts production blueprints
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import sys

from shorts_forge.core.config import settings
from shorts_forge.api.v1.router import api_router, legacy_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    description="Turns a topic, persona and call to action into a ready-to-shoot Shorts blueprint",
    version=settings.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
origins = [
    settings.FRONTEND_URL,
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)
app.include_router(legacy_router)


@app.get("/")
async def root():
    """Root endpoint - API health check"""
    return {
        "message": "Shorts Forge API is running",
        "version": settings.API_VERSION,
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "shorts-forge",
    }


@app.on_event("startup")
async def startup_event():
    """Application startup event"""
    logger.info("Starting Shorts Forge...")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"Frontend URL: {settings.FRONTEND_URL}")


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event"""
    logger.info("Shutting down Shorts Forge...")


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "shorts_forge.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
