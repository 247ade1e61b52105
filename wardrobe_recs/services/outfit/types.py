from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from wardrobe_recs.core.taxonomy import (
    ClothingCategory,
    ClothingColor,
    Occasion,
    Season,
    Style,
    WeatherCondition,
    parse_enum,
)


@dataclass(frozen=True)
class WardrobeItem:
    """Read-only snapshot of a wardrobe item.

    ``None`` in category/color/season/style means the stored value was missing
    or unrecognized; filters treat it as matching anything.
    """
    id: str
    category: Optional[ClothingCategory] = None
    color: Optional[ClothingColor] = None
    season: Optional[Season] = None
    style: Optional[Style] = None
    wear_count: int = 0
    is_favorite: bool = False

    @classmethod
    def from_raw(
        cls,
        id: Any,
        category: Any = None,
        color: Any = None,
        season: Any = None,
        style: Any = None,
        wear_count: Optional[int] = 0,
        is_favorite: Optional[bool] = False,
    ) -> "WardrobeItem":
        return cls(
            id=str(id),
            category=parse_enum(ClothingCategory, category),
            color=parse_enum(ClothingColor, color),
            season=parse_enum(Season, season),
            style=parse_enum(Style, style),
            wear_count=max(0, int(wear_count or 0)),
            is_favorite=bool(is_favorite),
        )


@dataclass(frozen=True)
class WeatherData:
    temperature_celsius: float
    condition: WeatherCondition = WeatherCondition.SUNNY
    humidity: float = 50.0
    wind_speed: float = 5.0

    @property
    def temperature_fahrenheit(self) -> float:
        return self.temperature_celsius * 9 / 5 + 32

    @property
    def is_cold(self) -> bool:
        return self.temperature_celsius < 15

    @property
    def is_hot(self) -> bool:
        return self.temperature_celsius > 25

    @property
    def recommended_season(self) -> Season:
        temp = self.temperature_celsius
        if temp < 5:
            return Season.WINTER
        if temp < 15:
            return Season.FALL
        if temp < 25:
            return Season.SPRING
        return Season.SUMMER


@dataclass(frozen=True)
class OutfitTemplate:
    required_categories: Tuple[ClothingCategory, ...]
    minimum_items: int


@dataclass(frozen=True)
class OutfitRecommendation:
    item_ids: List[str]
    reasoning: str
    overall_score: float
    weather_suitability: float
    color_harmony: float
    style_consistency: float


@dataclass
class ScoringContext:
    """Inputs shared by the outfit-level scorers."""
    items: List[WardrobeItem]
    weather: WeatherData

    @property
    def items_count(self) -> int:
        return len(self.items)


@dataclass
class ReasoningContext:
    occasion: Occasion
    weather: WeatherData
    color_harmony: float
    weather_suitability: float
    style_consistency: float
