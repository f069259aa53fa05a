from pydantic_settings import BaseSettings
from pathlib import Path
import yaml


class Settings(BaseSettings):
    app_name: str = "Governance & Risk Dashboard Gateway"
    app_version: str = "1.0.0"
    debug: bool = False

    # Persistence service (Flask REST API)
    api_base_url: str = "http://localhost:5000/api/v1"
    api_timeout: float = 30.0  # seconds
    api_token: str = ""

    # Category lookup cache, 0 disables expiry (invalidation only)
    category_cache_ttl: float = 0

    # Paths
    config_dir: Path = Path("config")

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    class Config:
        env_file = ".env"
        env_prefix = "GOVDASH_"


settings = Settings()


def load_yaml_config(filename: str) -> dict:
    config_path = settings.config_dir / filename
    if config_path.exists():
        with open(config_path, "r") as f:
            return yaml.safe_load(f) or {}
    return {}
