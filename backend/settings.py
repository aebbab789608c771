from pydantic import BaseModel
import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in {"0", "false", "no", "off", ""}


class Settings(BaseModel):
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    chess_api_url: str = os.getenv("CHESS_API_URL", "https://chess-api.com/v1")
    chess_api_depth: int = int(os.getenv("CHESS_API_DEPTH", "12"))
    chess_api_timeout: float = float(os.getenv("CHESS_API_TIMEOUT", "10"))
    chess_api_enabled: bool = _env_flag("CHESS_API_ENABLED", "1")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
