from abc import ABC, abstractmethod
from collections import Counter

from wardrobe_recs.core.taxonomy import Season
from .colors import UNKNOWN_SCORE, outfit_color_harmony
from .types import ScoringContext


class BaseScorer(ABC):
    """Base class for outfit-level dimension scorers."""

    @property
    @abstractmethod
    def dimension_name(self) -> str:
        pass

    @abstractmethod
    def score(self, ctx: ScoringContext) -> float:
        pass

    def _clamp_score(self, value: float) -> float:
        return max(0.0, min(1.0, value))


class ColorHarmonyScorer(BaseScorer):
    """Mean pairwise color harmony of the selected items."""

    dimension_name = "color_harmony"

    def score(self, ctx: ScoringContext) -> float:
        return self._clamp_score(outfit_color_harmony(item.color for item in ctx.items))


class WeatherSuitabilityScorer(BaseScorer):
    """
    Share of selected items made for today's season.

    Items without a recognized season are not counted as suitable, but they
    still sit in the denominator.
    """

    dimension_name = "weather_suitability"

    def score(self, ctx: ScoringContext) -> float:
        if not ctx.items_count:
            return 0.0
        target = ctx.weather.recommended_season
        suitable = sum(
            1 for item in ctx.items
            if item.season is not None and item.season in (target, Season.ALL_SEASON)
        )
        return self._clamp_score(suitable / ctx.items_count)


class StyleConsistencyScorer(BaseScorer):
    """Share of styled items that belong to the dominant style."""

    dimension_name = "style_consistency"

    def score(self, ctx: ScoringContext) -> float:
        styles = [item.style for item in ctx.items if item.style is not None]
        if not styles:
            return UNKNOWN_SCORE
        _, top_count = Counter(styles).most_common(1)[0]
        return self._clamp_score(top_count / len(styles))
