from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings(BaseModel):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./tasks.db")
    sql_echo: bool = _env_bool("SQL_ECHO")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    cors_origins: list[str] = _env_list(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    )

    # Used by taskapp.client when no base URL is passed explicitly
    task_api_url: str = os.getenv("TASK_API_URL", "http://127.0.0.1:8000")

settings = Settings()
