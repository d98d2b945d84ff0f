# settings.py
from pathlib import Path
from typing import Optional, Dict, Any

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_FRONTEND_URL = "http://localhost:5173"


class Settings(BaseSettings):
    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    # === SQLite ===
    DB_PATH: str = str(BASE_DIR / "blogs.db")
    DB_ECHO: bool = False

    # === Groq (OpenAI compatible) ===
    GROQ_API_KEY: Optional[str] = None
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"
    AI_TEMPERATURE: float = 0.8
    AI_MAX_TOKENS: int = 600

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origin(self) -> str:
        """
        Hosted deployments may pass only the service name (e.g. 'aiblog-frontend'),
        which is expanded to the full onrender.com origin.
        """
        url = (self.FRONTEND_URL or DEFAULT_FRONTEND_URL).strip()
        if url == DEFAULT_FRONTEND_URL:
            return url
        if ".onrender.com" not in url and "localhost" not in url:
            return f"https://{url}.onrender.com"
        if not url.startswith("http"):
            return f"https://{url}"
        return url

    @property
    def is_memory_db(self) -> bool:
        return self.DB_PATH == ":memory:"

    @property
    def database_url(self) -> str:
        if self.is_memory_db:
            return "sqlite://"
        return f"sqlite:///{Path(self.DB_PATH).expanduser()}"

    def engine_kwargs(self) -> Dict[str, Any]:
        return {
            "echo": self.DB_ECHO,
            "connect_args": {"check_same_thread": False},
        }


settings = Settings()
