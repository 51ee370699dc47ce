from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Hosts
    API_DOMAIN: str
    FRONTEND_DOMAIN: str
    FRONTEND_PATH: str

    # Server
    HOST: str = "0.0.0.0"
    API_PORT: int = 2458

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./database.sqlite"
    DATABASE_ECHO: bool = False

    # App
    LOG_LEVEL: str = "INFO"

    @property
    def origins(self) -> List[str]:
        return [
            f"{scheme}://{domain}"
            for domain in (self.API_DOMAIN, self.FRONTEND_DOMAIN)
            for scheme in ("http", "https")
        ]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
