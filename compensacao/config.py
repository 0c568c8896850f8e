from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from pydantic import Field
from typing import Optional

SISEMA_WFS_URL = "http://geoserver.meioambiente.mg.gov.br/ows"


class Settings(BaseSettings):
    """Application settings loaded from environment variables (.env)."""
    environment: str = Field(default="development", alias="ENVIRONMENT")
    database_url: str = Field(default="sqlite:///./compensacao.db", alias="DATABASE_URL")
    app_port: int = Field(default=8000, alias="APP_PORT")

    # Origem liberada no CORS, por ambiente
    client_url_dev: Optional[str] = Field(default="http://localhost:3000", alias="CLIENT_URL_DEV")
    client_url_prod: Optional[str] = Field(default=None, alias="CLIENT_URL_PROD")

    # Base da API publicada para o navegador (window.env) e usada pelo painel
    api_url_dev: Optional[str] = Field(default=None, alias="API_URL_DEV")
    api_url_prod: Optional[str] = Field(default=None, alias="API_URL_PROD")

    # GeoServer da IDE SISEMA
    wfs_base_url: str = Field(default=SISEMA_WFS_URL, alias="WFS_BASE_URL")
    wfs_timeout: Optional[float] = Field(default=None, alias="WFS_TIMEOUT")  # None = sem timeout

    siscal_url: str = Field(default="https://siscal.netlify.app/", alias="SISCAL_URL")

    # pydantic-settings v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def client_url(self) -> Optional[str]:
        return self.client_url_prod if self.is_production else self.client_url_dev

    @property
    def api_url(self) -> Optional[str]:
        return self.api_url_prod if self.is_production else self.api_url_dev


def get_settings() -> "Settings":
    return Settings()  # type: ignore[call-arg]
