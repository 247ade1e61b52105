from typing import Optional
from fastapi import APIRouter, Depends, Query

from wardrobe_recs.routers.deps import get_weather_service
from wardrobe_recs.routers.recommendations_helpers import _weather_out
from wardrobe_recs.schemas.recommendations import WeatherOut
from wardrobe_recs.services.weather import WeatherService

router = APIRouter(prefix="/weather", tags=["weather"])


@router.get("", response_model=WeatherOut)
async def current_weather(
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    service: WeatherService = Depends(get_weather_service),
):
    weather = await service.get_current_weather(latitude, longitude)
    return _weather_out(weather)
