from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Значения по умолчанию для подключения, переопределяются через окружение или .env
class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
    elastic_host: str = Field("http://localhost", alias="ELASTIC_HOST")
    elastic_port: str = Field("9200", alias="ELASTIC_P1")
    max_retries: int = Field(10, alias="ELASTIC_MAX_RETRIES")
    retry_after: int = Field(5000, alias="ELASTIC_RETRY_AFTER")

    @property
    def default_host(self) -> str:
        return f"{self.elastic_host}:{self.elastic_port}"


def get_settings() -> Settings:
    return Settings()
