"""
Configuration for the NiceGUI front-end.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WebSettings(BaseSettings):
    """Front-end settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    API_URL: str = Field(default="http://localhost:8000", description="Backend base URL")
    REQUEST_TIMEOUT: float = Field(default=30.0, description="API request timeout in seconds")
    CONNECT_TIMEOUT: float = Field(default=10.0, description="API connect timeout in seconds")

    STORAGE_SECRET: str = Field(
        default="change-me-boutique-storage",
        description="Secret for NiceGUI user storage (admin token lives there)",
    )
    WEB_PORT: int = Field(default=8081, description="Port of the web front-end")
    SITE_TITLE: str = Field(default="BoutiqueChat", description="Fallback site name")

    CURRENCY: str = Field(default="RUB", description="Currency label shown next to prices")
    CHAT_MESSAGE_TEMPLATE: str = Field(
        default="Hello! I would like to order: {name}\nPrice: {price}\n({site_name})",
        description="Prefilled chat message; fields: name, price, site_name",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    ENABLE_FILE_LOGGING: bool = Field(default=False, description="Enable logging to file")
    LOG_DIR: str = Field(default="./logs", description="Directory for log files")


web_settings = WebSettings()
