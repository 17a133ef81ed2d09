from pydantic import BaseModel
class HealthResponse(BaseModel):
    """Health check response model"""
    status: str
    songs_dir_exists: bool
    mp3_dir_exists: bool
    backend_version: str = "1.0.0"
