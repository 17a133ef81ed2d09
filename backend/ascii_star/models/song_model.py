from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SongHeader(BaseModel):
    """Header block of an UltraStar song document"""
    model_config = ConfigDict(frozen=True)

    title: str
    artist: str
    genre: Optional[str] = None

    # Not used by search
    audio_path: Optional[str] = Field(None, description="Value of the #MP3 tag")
    bpm: Optional[float] = None
    gap: Optional[float] = None
    cover_path: Optional[str] = None
    background_path: Optional[str] = None
    video_path: Optional[str] = None
    video_gap: Optional[float] = None
    edition: Optional[str] = None
    language: Optional[str] = None
    year: Optional[int] = None
    relative: Optional[bool] = None
    unknown: dict[str, str] = Field(default_factory=dict, description="Unrecognised tags, keyed by upper-case tag name")
