import logging
import math
from typing import Dict, List, Optional, Sequence

from wardrobe_recs.core.taxonomy import ClothingCategory, Occasion, Season, StylePreference
from .colors import compatibility_with
from .reasoning import DEFAULT_LOCALE, ReasoningBuilder
from .scorers import (
    BaseScorer,
    ColorHarmonyScorer,
    StyleConsistencyScorer,
    WeatherSuitabilityScorer,
)
from .templates import styles_for, template_for
from .types import (
    OutfitRecommendation,
    ReasoningContext,
    ScoringContext,
    WardrobeItem,
    WeatherData,
)

logger = logging.getLogger(__name__)

FAVORITE_BONUS = 2.0
WEAR_BONUS_PER_WEAR = 0.1
WEAR_BONUS_CAP = 2.0
STYLE_PREFERENCE_BONUS = 3.0


def filter_by_weather(items: Sequence[WardrobeItem], weather: WeatherData) -> List[WardrobeItem]:
    target = weather.recommended_season
    return [
        item for item in items
        if item.season is None or item.season in (target, Season.ALL_SEASON)
    ]


def filter_by_occasion(items: Sequence[WardrobeItem], occasion: Occasion) -> List[WardrobeItem]:
    allowed = styles_for(occasion)
    return [item for item in items if item.style is None or item.style in allowed]


def candidate_score(
    item: WardrobeItem,
    existing: Sequence[WardrobeItem],
    style_preference: Optional[StylePreference],
) -> float:
    score = 0.0
    if item.is_favorite:
        score += FAVORITE_BONUS
    score += min(item.wear_count * WEAR_BONUS_PER_WEAR, WEAR_BONUS_CAP)
    score += compatibility_with(item.color, [e.color for e in existing])
    if style_preference is not None and item.style is not None and item.style.value == style_preference.value:
        score += STYLE_PREFERENCE_BONUS
    return score


def select_best_item(
    items: Sequence[WardrobeItem],
    category: ClothingCategory,
    style_preference: Optional[StylePreference],
    existing: Sequence[WardrobeItem],
) -> Optional[WardrobeItem]:
    """Highest scoring unselected item of ``category``; first seen wins ties."""
    taken = {id(e) for e in existing}
    best: Optional[WardrobeItem] = None
    best_score = 0.0
    for item in items:
        if item.category != category or id(item) in taken:
            continue
        score = candidate_score(item, existing, style_preference)
        if best is None or score > best_score:
            best, best_score = item, score
    return best


class OutfitRecommendationEngine:
    """Greedy, deterministic outfit builder.

    Categories are filled in template order and earlier picks are never
    revisited. The engine holds no per-request state and is safe to share.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.scorers: List[BaseScorer] = [
            ColorHarmonyScorer(),
            WeatherSuitabilityScorer(),
            StyleConsistencyScorer(),
        ]
        self.reasoning = ReasoningBuilder(locale)

    def generate_outfit(
        self,
        occasion: Occasion,
        weather: WeatherData,
        style_preference: Optional[StylePreference],
        items: Sequence[WardrobeItem],
    ) -> Optional[OutfitRecommendation]:
        """Build one outfit, or return ``None`` when the wardrobe can't cover it."""
        if not items:
            logger.debug("outfit:none reason=empty_pool occasion=%s", occasion.value)
            return None

        if not math.isfinite(weather.temperature_celsius):
            logger.debug("outfit:none reason=invalid_temperature temp=%r", weather.temperature_celsius)
            return None

        seasonal = filter_by_weather(items, weather)
        if not seasonal:
            logger.debug(
                "outfit:none reason=no_seasonal_items season=%s pool=%d",
                weather.recommended_season.value, len(items),
            )
            return None

        candidates = filter_by_occasion(seasonal, occasion)
        if not candidates:
            logger.debug("outfit:none reason=no_occasion_items occasion=%s pool=%d", occasion.value, len(seasonal))
            return None

        template = template_for(occasion)
        selected: List[WardrobeItem] = []
        for category in template.required_categories:
            item = select_best_item(candidates, category, style_preference, selected)
            if item is not None:
                selected.append(item)

        if len(selected) < template.minimum_items:
            logger.debug(
                "outfit:none reason=below_minimum occasion=%s selected=%d minimum=%d",
                occasion.value, len(selected), template.minimum_items,
            )
            return None

        ctx = ScoringContext(items=selected, weather=weather)
        scores: Dict[str, float] = {s.dimension_name: s.score(ctx) for s in self.scorers}
        overall = sum(scores.values()) / len(scores)

        reasoning = self.reasoning.build(
            ReasoningContext(
                occasion=occasion,
                weather=weather,
                color_harmony=scores["color_harmony"],
                weather_suitability=scores["weather_suitability"],
                style_consistency=scores["style_consistency"],
            )
        )
        logger.debug(
            "outfit:selected occasion=%s items=%s overall=%.3f",
            occasion.value, [i.id for i in selected], overall,
        )
        return OutfitRecommendation(
            item_ids=[i.id for i in selected],
            reasoning=reasoning,
            overall_score=overall,
            weather_suitability=scores["weather_suitability"],
            color_harmony=scores["color_harmony"],
            style_consistency=scores["style_consistency"],
        )


_default_engine = OutfitRecommendationEngine()


def generate_outfit(
    occasion: Occasion,
    weather: WeatherData,
    style_preference: Optional[StylePreference],
    items: Sequence[WardrobeItem],
) -> Optional[OutfitRecommendation]:
    return _default_engine.generate_outfit(occasion, weather, style_preference, items)
