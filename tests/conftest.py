import pytest
from wardrobe_recs.main import app
from wardrobe_recs.routers import deps
from wardrobe_recs.services.outfit.types import WeatherData


class FixedWeatherService:
    def __init__(self, weather: WeatherData):
        self.weather = weather
        self.calls = []

    async def get_current_weather(self, latitude=None, longitude=None) -> WeatherData:
        self.calls.append((latitude, longitude))
        return self.weather


@pytest.fixture
def weather_service():
    return FixedWeatherService(WeatherData(temperature_celsius=12.0))


@pytest.fixture(autouse=True)
def override_weather(weather_service):
    app.dependency_overrides[deps.get_weather_service] = lambda: weather_service
    yield
    app.dependency_overrides.pop(deps.get_weather_service, None)
