from typing import List, Optional
from fastapi import HTTPException

from wardrobe_recs.core.taxonomy import Occasion, StylePreference, WeatherCondition, parse_enum
from wardrobe_recs.schemas.recommendations import (
    OutfitRecommendationOut,
    WardrobeItemIn,
    WeatherIn,
    WeatherOut,
)
from wardrobe_recs.services.outfit.types import OutfitRecommendation, WardrobeItem, WeatherData


def _parse_occasion(raw: str) -> Occasion:
    occasion = parse_enum(Occasion, raw, loose=True)
    if occasion is None:
        raise HTTPException(status_code=422, detail="invalid_occasion")
    return occasion


def _parse_style_preference(raw: Optional[str]) -> Optional[StylePreference]:
    if raw is None or not raw.strip():
        return None
    pref = parse_enum(StylePreference, raw, loose=True)
    if pref is None:
        raise HTTPException(status_code=422, detail="invalid_style_preference")
    return pref


def _to_items(items: List[WardrobeItemIn]) -> List[WardrobeItem]:
    return [
        WardrobeItem.from_raw(
            id=it.id,
            category=it.category,
            color=it.color,
            season=it.season,
            style=it.style,
            wear_count=it.wear_count,
            is_favorite=it.is_favorite,
        )
        for it in items
    ]


def _to_weather(weather: WeatherIn) -> WeatherData:
    return WeatherData(
        temperature_celsius=weather.temperature_celsius,
        condition=parse_enum(WeatherCondition, weather.condition, loose=True) or WeatherCondition.SUNNY,
        humidity=weather.humidity,
        wind_speed=weather.wind_speed,
    )


def _weather_out(weather: WeatherData) -> WeatherOut:
    return WeatherOut(
        temperature_celsius=weather.temperature_celsius,
        temperature_fahrenheit=weather.temperature_fahrenheit,
        condition=weather.condition.value,
        humidity=weather.humidity,
        wind_speed=weather.wind_speed,
        is_cold=weather.is_cold,
        is_hot=weather.is_hot,
        recommended_season=weather.recommended_season.value,
    )


def _recommendation_out(rec: OutfitRecommendation) -> OutfitRecommendationOut:
    return OutfitRecommendationOut(
        item_ids=list(rec.item_ids),
        reasoning=rec.reasoning,
        overall_score=rec.overall_score,
        weather_suitability=rec.weather_suitability,
        color_harmony=rec.color_harmony,
        style_consistency=rec.style_consistency,
    )
