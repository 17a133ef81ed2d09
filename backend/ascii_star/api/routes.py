
from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import FileResponse
from typing import Optional
import os
import logging
from ascii_star.config import settings
from ascii_star.models.health_model import HealthResponse
from ascii_star.models.search_model import SearchResponse
from ascii_star.services.search import SearchService
from ascii_star.utils.file_manager import SONG_ROUTE_PREFIX, resolve_library_path

logger = logging.getLogger(__name__)

router = APIRouter()

search_service: Optional[SearchService] = None


def get_search_service() -> SearchService:
    if search_service is None:
        raise HTTPException(status_code=503, detail="Search service not initialized")
    return search_service


def library_file_response(root: str, path: str) -> FileResponse:
    try:
        file_path = resolve_library_path(root, path)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"File not found: {path}")
    return FileResponse(file_path)


@router.get("/api/health", response_model=HealthResponse)
async def health_check():
    songs_dir_exists = os.path.isdir(settings.SONG_PATH)
    mp3_dir_exists = os.path.isdir(settings.MP3_PATH)

    return HealthResponse(
        status="healthy" if search_service is not None and songs_dir_exists else "unhealthy",
        songs_dir_exists=songs_dir_exists,
        mp3_dir_exists=mp3_dir_exists,
    )


@router.get("/mp3/{path:path}")
async def get_mp3(path: str):
    return library_file_response(settings.MP3_PATH, path)


@router.get(f"/{SONG_ROUTE_PREFIX}/{{path:path}}")
async def get_song_txt(path: str):
    return library_file_response(settings.SONG_PATH, path)


# Plain def: FastAPI runs the blocking directory scan in its threadpool
@router.get("/search", response_model=SearchResponse)
def search_songs(q: str = "", search_svc: SearchService = Depends(get_search_service)):
    return SearchResponse(results=search_svc.search(q))
