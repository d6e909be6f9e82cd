"""Application configuration"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    PROJECT_NAME: str = "GetFurnitures"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Furniture marketplace connecting manufacturers to end users"

    # Security
    SECRET_KEY: str = Field(...)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=7 * 24 * 60)  # 7 days
    PASSWORD_RESET_EXPIRE_MINUTES: int = Field(default=10)
    ALLOW_ADMIN_REGISTRATION: bool = Field(default=True)

    # Database
    DATABASE_URL: str = Field(...)

    # Email SMTP Configuration
    SMTP_HOST: str = Field(default="smtp.gmail.com")
    SMTP_PORT: int = Field(default=587)
    SMTP_USERNAME: str = Field(default="")
    SMTP_PASSWORD: str = Field(default="")
    SMTP_USE_TLS: bool = Field(default=True)
    FROM_EMAIL: str = Field(default="noreply@getfurnitures.app")
    FROM_NAME: str = Field(default="GetFurniture")
    ADMIN_EMAIL: str = Field(default="admin@getfurnitures.app")  # Receives new order alerts

    # CORS
    ALLOWED_HOSTS: list[str] = Field(default=["http://localhost:5173", "http://localhost:3000"])

    # Application URLs
    FRONTEND_URL: str = Field(default="http://localhost:5173")

    # Product image uploads
    UPLOAD_DIR: str = Field(default="uploads")
    MAX_FILE_SIZE: int = Field(default=5 * 1024 * 1024)  # 5MB
    MAX_PRODUCT_IMAGES: int = Field(default=5)
    ALLOWED_IMAGE_TYPES: list[str] = Field(default=["image/jpeg", "image/png", "image/webp"])
    ALLOWED_IMAGE_EXTENSIONS: list[str] = Field(default=[".jpg", ".jpeg", ".png", ".webp"])

    # Development
    LOG_LEVEL: str = Field(default="INFO")
    DEBUG: bool = Field(default=False)
    TESTING: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()
