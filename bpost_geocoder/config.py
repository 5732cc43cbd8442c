"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names (BPOST_API_KEY,
BPOST_ENVIRONMENT, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from bpost_geocoder.domain.value_objects.enums import BpostEnvironment


class Settings(BaseSettings):
    # bpost
    bpost_api_key: str = Field(default="", validation_alias="BPOST_API_KEY")
    bpost_environment: BpostEnvironment = Field(
        default=BpostEnvironment.LEGACY,
        validation_alias="BPOST_ENVIRONMENT",
    )
    # Overrides the URL implied by bpost_environment when set
    bpost_endpoint_url: str = Field(default="", validation_alias="BPOST_ENDPOINT_URL")
    bpost_default_locale: str = Field(default="", validation_alias="BPOST_DEFAULT_LOCALE")

    # HTTP transport
    http_timeout: float = Field(default=10.0, validation_alias="HTTP_TIMEOUT")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
