from wardrobe_recs.services.weather import WeatherService

_weather_service = WeatherService()


def get_weather_service() -> WeatherService:
    return _weather_service
