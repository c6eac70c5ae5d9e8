from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./chesslist.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    class Config:
        env_file = ".env"

settings = Settings()
