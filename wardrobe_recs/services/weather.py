import logging
import math
import time
from typing import Any, Dict, Optional, Tuple

import httpx

from wardrobe_recs.core.config import settings
from wardrobe_recs.core.taxonomy import WeatherCondition
from wardrobe_recs.services.outfit.types import WeatherData

logger = logging.getLogger(__name__)

CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code"


class WeatherProviderError(Exception):
    pass


def map_weather_code(code: int) -> WeatherCondition:
    """WMO weather code -> condition, as reported by Open-Meteo."""
    if code == 0:
        return WeatherCondition.SUNNY
    if 1 <= code <= 3:
        return WeatherCondition.CLOUDY
    if code in (45, 48):
        return WeatherCondition.FOGGY
    if 51 <= code <= 67 or 80 <= code <= 82:
        return WeatherCondition.RAINY
    if 71 <= code <= 77 or 85 <= code <= 86:
        return WeatherCondition.SNOWY
    return WeatherCondition.SUNNY


def fallback_weather() -> WeatherData:
    return WeatherData(
        temperature_celsius=settings.WEATHER_FALLBACK_TEMP_C,
        condition=WeatherCondition.SUNNY,
        humidity=settings.WEATHER_FALLBACK_HUMIDITY,
        wind_speed=settings.WEATHER_FALLBACK_WIND_SPEED,
    )


def parse_open_meteo(payload: Dict[str, Any]) -> WeatherData:
    try:
        current = payload["current"]
        weather = WeatherData(
            temperature_celsius=float(current["temperature_2m"]),
            condition=map_weather_code(int(current["weather_code"])),
            humidity=float(current["relative_humidity_2m"]),
            wind_speed=float(current["wind_speed_10m"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        raise WeatherProviderError(f"invalid_weather_payload: {exc}") from exc
    if not all(math.isfinite(v) for v in (weather.temperature_celsius, weather.humidity, weather.wind_speed)):
        raise WeatherProviderError("invalid_weather_payload: non-finite value")
    return weather


class WeatherService:
    """Current weather from Open-Meteo with a short in-process cache.

    Any provider failure degrades to the fallback snapshot so a recommendation
    can still be made.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        cache_ttl_s: Optional[int] = None,
        cache_max_entries: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url or settings.WEATHER_BASE_URL
        self.timeout_s = timeout_s if timeout_s is not None else settings.WEATHER_TIMEOUT_S
        self.cache_ttl_s = cache_ttl_s if cache_ttl_s is not None else settings.WEATHER_CACHE_TTL_S
        self.cache_max_entries = (
            cache_max_entries if cache_max_entries is not None else settings.WEATHER_CACHE_MAX_ENTRIES
        )
        self._transport = transport
        self._cache: Dict[Tuple[float, float], Tuple[float, WeatherData]] = {}

    @staticmethod
    def _cache_key(latitude: float, longitude: float) -> Tuple[float, float]:
        # ~1 km grid
        return round(latitude, 2), round(longitude, 2)

    async def fetch(self, latitude: float, longitude: float) -> WeatherData:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": CURRENT_FIELDS,
            "timezone": "auto",
        }
        start = time.perf_counter()
        async with httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport) as client:
            resp = await client.get(self.base_url, params=params)
        if resp.status_code != 200:
            raise WeatherProviderError(f"weather_http_{resp.status_code}")
        try:
            payload = resp.json()
        except ValueError as exc:
            raise WeatherProviderError("invalid_weather_payload") from exc
        weather = parse_open_meteo(payload)
        logger.info(
            "weather:fetch lat=%.2f lon=%.2f temp=%.1f %.1fms",
            latitude, longitude, weather.temperature_celsius, (time.perf_counter() - start) * 1000,
        )
        return weather

    async def get_current_weather(
        self, latitude: Optional[float] = None, longitude: Optional[float] = None
    ) -> WeatherData:
        if latitude is None or longitude is None:
            latitude, longitude = settings.WEATHER_DEFAULT_LATITUDE, settings.WEATHER_DEFAULT_LONGITUDE
        if not settings.WEATHER_ENABLED or latitude is None or longitude is None:
            return fallback_weather()

        key = self._cache_key(latitude, longitude)
        cached = self._cache_get(key)
        if cached is not None:
            return cached

        try:
            weather = await self.fetch(latitude, longitude)
        except (WeatherProviderError, httpx.HTTPError) as exc:
            logger.warning("weather:fallback lat=%.2f lon=%.2f error=%s", latitude, longitude, exc)
            return fallback_weather()

        self._cache_put(key, weather)
        return weather

    def _cache_get(self, key: Tuple[float, float]) -> Optional[WeatherData]:
        cached = self._cache.get(key)
        if cached is None:
            return None
        if time.monotonic() - cached[0] >= self.cache_ttl_s:
            del self._cache[key]
            return None
        return cached[1]

    def _cache_put(self, key: Tuple[float, float], weather: WeatherData) -> None:
        now = time.monotonic()
        for stale in [k for k, (ts, _) in self._cache.items() if now - ts >= self.cache_ttl_s]:
            del self._cache[stale]
        self._cache.pop(key, None)
        # insertion order is age order; drop the oldest
        while self._cache and len(self._cache) >= self.cache_max_entries:
            del self._cache[next(iter(self._cache))]
        self._cache[key] = (now, weather)

    def clear_cache(self) -> None:
        self._cache.clear()
