from .engine import OutfitRecommendationEngine, generate_outfit
from .colors import color_harmony, outfit_color_harmony
from .reasoning import ReasoningBuilder
from .scorers import (
    ColorHarmonyScorer,
    WeatherSuitabilityScorer,
    StyleConsistencyScorer,
)
from .types import OutfitRecommendation, WardrobeItem, WeatherData

__all__ = [
    "OutfitRecommendationEngine",
    "generate_outfit",
    "color_harmony",
    "outfit_color_harmony",
    "ReasoningBuilder",
    "ColorHarmonyScorer",
    "WeatherSuitabilityScorer",
    "StyleConsistencyScorer",
    "OutfitRecommendation",
    "WardrobeItem",
    "WeatherData",
]
