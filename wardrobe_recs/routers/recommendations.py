import logging
from fastapi import APIRouter, Depends

from wardrobe_recs.core.config import settings
from wardrobe_recs.core.taxonomy import ClothingColor, parse_enum
from wardrobe_recs.routers.deps import get_weather_service
from wardrobe_recs.routers.recommendations_helpers import (
    _parse_occasion,
    _parse_style_preference,
    _recommendation_out,
    _to_items,
    _to_weather,
    _weather_out,
)
from wardrobe_recs.schemas.recommendations import (
    ColorHarmonyIn,
    ColorHarmonyOut,
    OutfitRequest,
    OutfitResponse,
)
from wardrobe_recs.services.outfit import OutfitRecommendationEngine, outfit_color_harmony
from wardrobe_recs.services.outfit.reasoning import DEFAULT_LOCALE, PHRASES
from wardrobe_recs.services.weather import WeatherService

router = APIRouter(prefix="/recommendations", tags=["recommendations"])
logger = logging.getLogger("uvicorn.error")

_engines: dict[str, OutfitRecommendationEngine] = {}


def get_engine(locale: str | None = None) -> OutfitRecommendationEngine:
    key = locale or settings.REASONING_LOCALE
    if key not in PHRASES:
        key = DEFAULT_LOCALE
    if key not in _engines:
        _engines[key] = OutfitRecommendationEngine(locale=key)
    return _engines[key]


@router.post("/outfit", response_model=OutfitResponse)
async def recommend_outfit(
    payload: OutfitRequest,
    weather_service: WeatherService = Depends(get_weather_service),
):
    occasion = _parse_occasion(payload.occasion)
    style_preference = _parse_style_preference(payload.style_preference)

    if payload.weather is not None:
        weather = _to_weather(payload.weather)
    else:
        weather = await weather_service.get_current_weather(payload.latitude, payload.longitude)

    items = _to_items(payload.items)
    rec = get_engine(payload.locale).generate_outfit(occasion, weather, style_preference, items)
    logger.info(
        "recs:outfit occasion=%s pool=%d temp=%.1f result=%s",
        occasion.value, len(items), weather.temperature_celsius, "ok" if rec else "none",
    )
    if rec is None:
        return OutfitResponse(recommendation=None, weather=_weather_out(weather), detail="insufficient_wardrobe")
    return OutfitResponse(recommendation=_recommendation_out(rec), weather=_weather_out(weather))


@router.post("/color-harmony", response_model=ColorHarmonyOut)
async def score_color_harmony(payload: ColorHarmonyIn):
    recognized, ignored = [], []
    for raw in payload.colors:
        color = parse_enum(ClothingColor, raw, loose=True)
        if color is None:
            ignored.append(raw)
        else:
            recognized.append(color)
    return ColorHarmonyOut(
        score=outfit_color_harmony(recognized),
        recognized=[c.value for c in recognized],
        ignored=ignored,
    )
