from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "EZElectronics API"
    API_PREFIX: str = "/ezelectronics"
    DATABASE_URL: str = "sqlite:///./ezelectronics.db"
    DATABASE_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # Sessions
    SECRET_KEY: str = "supersecretkey_change_me_in_production"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "ezelectronics_session"
    SESSION_EXPIRE_MINUTES: int = 60 * 24 # 1 day

    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
