
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    APP_NAME: str = "socially-api"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    SEED_TASKS: bool = True
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_api_settings() -> ApiSettings:
    return ApiSettings() # type: ignore[call-arg]
