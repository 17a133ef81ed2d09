from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from ascii_star.config import settings
from ascii_star.api import routes
from ascii_star.services.search import SearchService


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events
    """

    routes.search_service = SearchService(songs_dir=settings.SONG_PATH)
    library_info = routes.search_service.get_library_info()
    logger.info("=" * 60)
    logger.info("ascii-star server started successfully!")
    logger.info(f"Songs: {library_info['songs_dir']} (exists: {library_info['songs_dir_exists']})")
    logger.info(f"MP3s: {settings.MP3_PATH}")
    logger.info("=" * 60)

    yield

    routes.search_service = None


# Create FastAPI app
app = FastAPI(
    title="ascii-star API",
    description="Serves UltraStar song documents and audio, with keyword search over song headers",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(routes.router)


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "ascii-star API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ascii_star.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info"
    )
