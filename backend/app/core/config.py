from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class Settings(BaseModel):
    app_title: str = os.getenv("APP_TITLE", "User API (FastAPI + SQLModel)")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")
    db_echo: bool = _env_flag("DB_ECHO")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
