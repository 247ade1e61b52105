from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "Wardrobe Recommendations API"
    APP_ENV: str = "dev"
    API_PREFIX: str = "/v1"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    # Weather lookup (Open-Meteo, no key required)
    WEATHER_ENABLED: bool = True
    WEATHER_BASE_URL: str = "https://api.open-meteo.com/v1/forecast"
    WEATHER_TIMEOUT_S: float = 5.0
    WEATHER_CACHE_TTL_S: int = 1800
    WEATHER_CACHE_MAX_ENTRIES: int = 1024
    WEATHER_FALLBACK_TEMP_C: float = 20.0
    WEATHER_FALLBACK_HUMIDITY: float = 50.0
    WEATHER_FALLBACK_WIND_SPEED: float = 5.0
    WEATHER_DEFAULT_LATITUDE: float | None = None
    WEATHER_DEFAULT_LONGITUDE: float | None = None
    # Reasoning text
    REASONING_LOCALE: str = "en"

    @property
    def cors_origin_list(self) -> List[str]:
        val = self.CORS_ORIGINS
        if not val: return []
        if val == "*": return ["*"]
        return [v.strip() for v in val.split(",")]

settings = Settings()
