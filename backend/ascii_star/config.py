from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Library roots - relative to the working directory unless absolute
    SONG_PATH: str = "songs"  # UltraStar .txt documents
    MP3_PATH: str = "mp3"

    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
        "http://127.0.0.1:8080",
    ]

    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()
