from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Sales Dashboard API"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    SAMPLE_DAYS: int = 120
    SAMPLE_SEED: Optional[int] = None
    REGIONS: list[str] = ["North", "South", "East", "West"]
    PRODUCTS: list[str] = ["Gadget", "Widget", "Doohickey", "Apparel"]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
