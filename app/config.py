from typing import Optional

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    api_key: str = "dev-key-12345"
    app_name: str = "Negotiation Ledger API"
    database_path: str = "data/negotiations.db"
    shipments_path: str = "data/testData.json"
    drivers_path: str = "data/drivers.json"
    dashboard_dir: Optional[str] = None
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
