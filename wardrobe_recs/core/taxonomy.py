import re
import unicodedata
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class ClothingCategory(str, Enum):
    TOPS = "Tops"
    BOTTOMS = "Bottoms"
    SHOES = "Shoes"
    ACCESSORIES = "Accessories"
    OUTERWEAR = "Outerwear"
    DRESSES = "Dresses"
    ACTIVEWEAR = "Activewear"


class ClothingColor(str, Enum):
    BLACK = "Black"
    WHITE = "White"
    GRAY = "Gray"
    NAVY = "Navy"
    BLUE = "Blue"
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    ORANGE = "Orange"
    PURPLE = "Purple"
    PINK = "Pink"
    BROWN = "Brown"
    BEIGE = "Beige"
    MULTICOLOR = "Multicolor"


class Season(str, Enum):
    SUMMER = "Summer"
    WINTER = "Winter"
    SPRING = "Spring"
    FALL = "Fall"
    ALL_SEASON = "All Season"


class Style(str, Enum):
    CASUAL = "Casual"
    SMART_CASUAL = "SmartCasual"
    FORMAL = "Formal"
    BUSINESS = "Business"
    STREETWEAR = "Streetwear"
    SPORTSWEAR = "Sportswear"
    ATHLEISURE = "Athleisure"
    MINIMALIST = "Minimalist"
    CLASSIC = "Classic"
    BOHEMIAN = "Bohemian"
    VINTAGE = "Vintage"
    PREPPY = "Preppy"
    ROMANTIC = "Romantic"
    EVENING = "Evening"


class Occasion(str, Enum):
    WORK = "Work"
    CASUAL = "Casual"
    DATE = "Date"
    SPORTS = "Sports"
    PARTY = "Party"
    FORMAL = "Formal"
    TRAVEL = "Travel"
    HOME = "Home"


class StylePreference(str, Enum):
    CASUAL = "Casual"
    FORMAL = "Formal"
    STREETWEAR = "Streetwear"
    BUSINESS = "Business"
    EVENING = "Evening"
    SPORTSWEAR = "Sportswear"
    MIXED = "Mixed"


class WeatherCondition(str, Enum):
    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    SNOWY = "Snowy"
    WINDY = "Windy"
    FOGGY = "Foggy"


FACETS: Dict[str, Type[Enum]] = {
    "category": ClothingCategory,
    "color": ClothingColor,
    "season": Season,
    "style": Style,
    "occasion": Occasion,
    "style_preference": StylePreference,
    "weather_condition": WeatherCondition,
}


def _label_key(s: str) -> str:
    s = unicodedata.normalize("NFKD", s).encode("ascii", "ignore").decode()
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=None)
def _lookup(enum_cls: Type[E]) -> Dict[str, E]:
    table: Dict[str, E] = {}
    for member in enum_cls:
        table[_label_key(member.value)] = member
        table[_label_key(member.name)] = member
    return table


def parse_enum(enum_cls: Type[E], raw: Any, loose: bool = False) -> Optional[E]:
    """Parse a label into ``enum_cls``.

    Stored item labels must match a value exactly. With ``loose=True`` (request
    parameters typed by hand) case, spaces, underscores and hyphens are also
    ignored, so "all season", "ALL_SEASON" and "AllSeason" are the same season.
    Anything unparseable returns ``None``, which callers treat as a wildcard.
    """
    if isinstance(raw, enum_cls):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        pass
    if not loose:
        return None
    key = _label_key(raw)
    if not key:
        return None
    return _lookup(enum_cls).get(key)


def allowed_values(facet: str) -> List[str]:
    return [m.value for m in FACETS[facet]]


def taxonomy_snapshot() -> Dict[str, Any]:
    return {"facets": {name: {"values": allowed_values(name)} for name in FACETS}}
