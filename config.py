from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

DEFAULT_EXPIRES_IN = 3600


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./inventory.db"
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    EXPIRES_IN: int = DEFAULT_EXPIRES_IN
    MAX_UPLOAD_SIZE: int = 30 * 1024
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()


def get_settings() -> Settings:
    return settings
