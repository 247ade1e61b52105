"""
Synthetic wardrobes for outfit engine scenarios.
Items are built from raw labels the same way stored records are.
"""
from typing import Any, Dict, List

from wardrobe_recs.services.outfit.types import WardrobeItem, WeatherData


def item(id: str, category: str, color: str = None, season: str = "All Season", style: str = "Casual", **kw: Any) -> WardrobeItem:
    return WardrobeItem.from_raw(id=id, category=category, color=color, season=season, style=style, **kw)


def mild_weather() -> WeatherData:
    return WeatherData(temperature_celsius=20.0)


def neutral_casual_fixture() -> Dict[str, Any]:
    """Black top, gray bottom, white shoes; everything casual and all-season."""
    return {
        "items": [
            item("top-black", "Tops", "Black"),
            item("bottom-gray", "Bottoms", "Gray"),
            item("shoes-white", "Shoes", "White"),
        ],
        "expected_ids": ["top-black", "bottom-gray", "shoes-white"],
    }


def sports_without_shoes_fixture() -> Dict[str, Any]:
    """Activewear and a dress but no shoes: the sports template can't be met."""
    return {
        "items": [
            item("active-1", "Activewear", "Blue", style="Sportswear"),
            item("dress-1", "Dresses", "Red", style="Sportswear"),
        ],
    }


def winter_only_fixture() -> Dict[str, Any]:
    return {"items": [item("top-red-winter", "Tops", "Red", season="Winter")]}


def favorite_vs_worn_fixture() -> Dict[str, Any]:
    """Two black tops: a favorite never worn and a plain one worn five times."""
    return {
        "items": [
            item("top-worn", "Tops", "Black", wear_count=5),
            item("top-favorite", "Tops", "Black", is_favorite=True, wear_count=0),
            item("bottom", "Bottoms", "Navy"),
            item("shoes", "Shoes", "White"),
        ],
        "expected_top": "top-favorite",
    }


def work_wardrobe_fixture() -> List[WardrobeItem]:
    return [
        item("blazer", "Outerwear", "Navy", style="Business"),
        item("shirt", "Tops", "White", style="Business"),
        item("trousers", "Bottoms", "Gray", style="Formal"),
        item("loafers", "Shoes", "Brown", style="Business"),
        item("watch", "Accessories", "Black", style="Classic"),
        item("hoodie", "Tops", "Red", style="Streetwear", is_favorite=True),
    ]


ALL_FIXTURES = [
    neutral_casual_fixture,
    sports_without_shoes_fixture,
    winter_only_fixture,
    favorite_vs_worn_fixture,
]
