from typing import Optional
from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    path: str = Field(..., description="Fetchable path of the song document, e.g. song/queen.txt")
    title: str
    artist: str
    genre: Optional[str] = Field(None, description="Genre from the header (null if the #GENRE tag is absent)")


class SearchResponse(BaseModel):
    results: list[SearchResult]
