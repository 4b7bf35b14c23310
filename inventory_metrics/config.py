from typing import Dict, Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATEGORY_MIN_STOCK: Dict[str, int] = {
    "Electronics": 15,
    "Food & Beverages": 50,
    "Fitness": 10,
    "Home & Kitchen": 30,
}
DEFAULT_MIN_STOCK = 20

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    Dict fields such as CATEGORY_MIN_STOCK are read from JSON strings.
    """
    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"
    log_json: bool = False
    log_file: Optional[str] = None
    log_rotation: str = "10 MB"
    log_retention: int = 5

    # Product source
    product_source: Literal["json", "http"] = "json"
    data_dir: str = "sample_data"
    products_file: str = "products.json"
    api_base_url: Optional[str] = None
    api_token: Optional[str] = None
    api_timeout_seconds: float = 10.0

    # Stock classification
    category_min_stock: Dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_CATEGORY_MIN_STOCK))
    default_min_stock: int = DEFAULT_MIN_STOCK
    best_seller_value_threshold: float = 10000.0

    # UI settings
    currency_symbol: str = "₹"
    default_row_limit: int = 500
    min_row_limit: int = 50
    max_row_limit: int = 10000

    # Seed data settings
    default_seed_products: int = 60
    default_seed_value: int = 42

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
