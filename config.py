# config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    dev_mode: bool = False

    app_slug: str = "landed-cost"
    log_level: str = "INFO"

    # Custo médio do frete grátis obrigatório do Mercado Livre (vendas >= R$ 79)
    ml_shipping_support_estimate: float = 20.90

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
