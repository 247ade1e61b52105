from .wardrobe_fixtures import (
    item,
    mild_weather,
    neutral_casual_fixture,
    sports_without_shoes_fixture,
    winter_only_fixture,
    favorite_vs_worn_fixture,
    work_wardrobe_fixture,
    ALL_FIXTURES,
)

__all__ = [
    "item",
    "mild_weather",
    "neutral_casual_fixture",
    "sports_without_shoes_fixture",
    "winter_only_fixture",
    "favorite_vs_worn_fixture",
    "work_wardrobe_fixture",
    "ALL_FIXTURES",
]
