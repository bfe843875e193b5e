"""Settings for DynaQuery."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class DynaQuerySettings(BaseSettings):
    """DynaQuery configuration settings."""

    # AWS
    AWS_REGION: Optional[str] = "us-east-1"
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_SESSION_TOKEN: Optional[str] = None

    # DynamoDB
    DYNAMODB_ENDPOINT_URL: Optional[str] = None  # e.g. http://localhost:8000 for DynamoDB Local
    DYNAMODB_TABLE_PREFIX: str = ""

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = DynaQuerySettings()
