import httpx
import pytest

from wardrobe_recs.core.config import settings
from wardrobe_recs.core.taxonomy import Season, WeatherCondition
from wardrobe_recs.services.outfit.types import WeatherData
from wardrobe_recs.services.weather import (
    WeatherProviderError,
    WeatherService,
    map_weather_code,
    parse_open_meteo,
)


def _payload(temp=12.5, code=3):
    return {
        "current": {
            "temperature_2m": temp,
            "relative_humidity_2m": 71,
            "wind_speed_10m": 9.4,
            "weather_code": code,
        }
    }


class CountingHandler:
    def __init__(self, status=200, body=None):
        self.calls = 0
        self.status = status
        self.body = body if body is not None else _payload()
        self.last_request = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        self.last_request = request
        return httpx.Response(self.status, json=self.body)


@pytest.mark.parametrize(
    "temp,season",
    [(-10, Season.WINTER), (4.9, Season.WINTER), (5, Season.FALL), (14.9, Season.FALL),
     (15, Season.SPRING), (24.9, Season.SPRING), (25, Season.SUMMER), (38, Season.SUMMER)],
)
def test_recommended_season_buckets(temp, season):
    assert WeatherData(temperature_celsius=temp).recommended_season == season


def test_cold_hot_and_fahrenheit():
    assert WeatherData(temperature_celsius=14.9).is_cold
    assert not WeatherData(temperature_celsius=15).is_cold
    assert not WeatherData(temperature_celsius=25).is_hot
    assert WeatherData(temperature_celsius=25.1).is_hot
    assert WeatherData(temperature_celsius=20).temperature_fahrenheit == pytest.approx(68.0)


@pytest.mark.parametrize(
    "code,condition",
    [(0, WeatherCondition.SUNNY), (2, WeatherCondition.CLOUDY), (45, WeatherCondition.FOGGY),
     (61, WeatherCondition.RAINY), (81, WeatherCondition.RAINY), (73, WeatherCondition.SNOWY),
     (86, WeatherCondition.SNOWY), (95, WeatherCondition.SUNNY)],
)
def test_weather_codes(code, condition):
    assert map_weather_code(code) == condition


def test_parse_rejects_incomplete_payload():
    with pytest.raises(WeatherProviderError):
        parse_open_meteo({"current": {"temperature_2m": 10}})


@pytest.mark.asyncio
async def test_fetch_and_cache(monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", True)
    handler = CountingHandler()
    service = WeatherService(transport=httpx.MockTransport(handler))

    first = await service.get_current_weather(52.52, 13.41)
    second = await service.get_current_weather(52.521, 13.409)

    assert first == second
    assert first.temperature_celsius == 12.5
    assert first.condition == WeatherCondition.CLOUDY
    assert first.humidity == 71
    assert handler.calls == 1
    assert handler.last_request.url.params["current"].startswith("temperature_2m")


@pytest.mark.asyncio
async def test_cache_expires(monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", True)
    handler = CountingHandler()
    service = WeatherService(cache_ttl_s=0, transport=httpx.MockTransport(handler))
    await service.get_current_weather(1.0, 2.0)
    await service.get_current_weather(1.0, 2.0)
    assert handler.calls == 2


@pytest.mark.asyncio
async def test_provider_errors_fall_back(monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", True)
    monkeypatch.setattr(settings, "WEATHER_FALLBACK_TEMP_C", 20.0)
    handler = CountingHandler(status=503)
    service = WeatherService(transport=httpx.MockTransport(handler))

    weather = await service.get_current_weather(10.0, 10.0)
    assert weather.temperature_celsius == 20.0
    assert weather.condition == WeatherCondition.SUNNY

    with pytest.raises(WeatherProviderError):
        await service.fetch(10.0, 10.0)


@pytest.mark.asyncio
async def test_network_errors_fall_back(monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", True)

    def boom(request):
        raise httpx.ConnectError("unreachable", request=request)

    service = WeatherService(transport=httpx.MockTransport(boom))
    weather = await service.get_current_weather(10.0, 10.0)
    assert weather.temperature_celsius == settings.WEATHER_FALLBACK_TEMP_C


@pytest.mark.asyncio
async def test_disabled_or_no_location_skips_network(monkeypatch):
    handler = CountingHandler()
    service = WeatherService(transport=httpx.MockTransport(handler))

    monkeypatch.setattr(settings, "WEATHER_ENABLED", True)
    monkeypatch.setattr(settings, "WEATHER_DEFAULT_LATITUDE", None)
    monkeypatch.setattr(settings, "WEATHER_DEFAULT_LONGITUDE", None)
    await service.get_current_weather()

    monkeypatch.setattr(settings, "WEATHER_ENABLED", False)
    await service.get_current_weather(52.5, 13.4)

    assert handler.calls == 0


@pytest.mark.parametrize("bad", [float("inf"), float("nan")])
def test_parse_rejects_non_finite_values(bad):
    with pytest.raises(WeatherProviderError):
        parse_open_meteo(_payload(temp=bad))


@pytest.mark.asyncio
async def test_expired_entries_are_evicted(monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", True)
    handler = CountingHandler()
    service = WeatherService(cache_ttl_s=60, transport=httpx.MockTransport(handler))

    await service.get_current_weather(1.0, 2.0)
    key = service._cache_key(1.0, 2.0)
    stored_at, weather = service._cache[key]
    service._cache[key] = (stored_at - 120, weather)

    await service.get_current_weather(3.0, 4.0)
    assert key not in service._cache
    assert list(service._cache) == [service._cache_key(3.0, 4.0)]

    service._cache[service._cache_key(3.0, 4.0)] = (stored_at - 120, weather)
    await service.get_current_weather(3.0, 4.0)
    assert handler.calls == 3
    assert len(service._cache) == 1


@pytest.mark.asyncio
async def test_cache_is_bounded(monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", True)
    handler = CountingHandler()
    service = WeatherService(cache_max_entries=2, transport=httpx.MockTransport(handler))

    for lat in (1.0, 2.0, 3.0):
        await service.get_current_weather(lat, 0.0)

    assert list(service._cache) == [service._cache_key(2.0, 0.0), service._cache_key(3.0, 0.0)]


@pytest.mark.asyncio
async def test_fallback_snapshot_is_configurable(monkeypatch):
    monkeypatch.setattr(settings, "WEATHER_ENABLED", False)
    monkeypatch.setattr(settings, "WEATHER_FALLBACK_TEMP_C", 8.0)
    monkeypatch.setattr(settings, "WEATHER_FALLBACK_HUMIDITY", 80.0)
    monkeypatch.setattr(settings, "WEATHER_FALLBACK_WIND_SPEED", 12.0)

    weather = await WeatherService().get_current_weather(52.5, 13.4)
    assert weather == WeatherData(
        temperature_celsius=8.0, condition=WeatherCondition.SUNNY, humidity=80.0, wind_speed=12.0
    )
