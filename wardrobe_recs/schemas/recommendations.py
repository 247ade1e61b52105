from pydantic import BaseModel, Field
from typing import Optional, List, Literal


class WardrobeItemIn(BaseModel):
    """Item record as stored by the client; labels are free strings."""
    id: str
    category: Optional[str] = None
    color: Optional[str] = None
    season: Optional[str] = None
    style: Optional[str] = None
    wear_count: int = Field(default=0, ge=0)
    is_favorite: bool = False


class WeatherIn(BaseModel):
    temperature_celsius: float = Field(..., allow_inf_nan=False)
    condition: Optional[str] = None
    humidity: float = Field(default=50.0, ge=0, le=100, allow_inf_nan=False)
    wind_speed: float = Field(default=5.0, ge=0, allow_inf_nan=False)


class WeatherOut(BaseModel):
    temperature_celsius: float
    temperature_fahrenheit: float
    condition: str
    humidity: float
    wind_speed: float
    is_cold: bool
    is_hot: bool
    recommended_season: str


class OutfitRequest(BaseModel):
    occasion: str
    style_preference: Optional[str] = None
    items: List[WardrobeItemIn] = Field(default_factory=list)
    weather: Optional[WeatherIn] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    locale: Optional[str] = None


class OutfitRecommendationOut(BaseModel):
    item_ids: List[str]
    reasoning: str
    overall_score: float = Field(..., ge=0, le=1)
    weather_suitability: float = Field(..., ge=0, le=1)
    color_harmony: float = Field(..., ge=0, le=1)
    style_consistency: float = Field(..., ge=0, le=1)


class OutfitResponse(BaseModel):
    recommendation: Optional[OutfitRecommendationOut] = None
    weather: WeatherOut
    detail: Optional[Literal["insufficient_wardrobe"]] = None


class ColorHarmonyIn(BaseModel):
    colors: List[str] = Field(default_factory=list)


class ColorHarmonyOut(BaseModel):
    score: float = Field(..., ge=0, le=1)
    recognized: List[str]
    ignored: List[str]
