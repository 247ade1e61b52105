from typing import Dict, FrozenSet

from wardrobe_recs.core.taxonomy import ClothingCategory as Cat, Occasion, Style
from .types import OutfitTemplate

OCCASION_STYLES: Dict[Occasion, FrozenSet[Style]] = {
    Occasion.WORK: frozenset({Style.BUSINESS, Style.FORMAL, Style.CASUAL}),
    Occasion.CASUAL: frozenset({Style.CASUAL, Style.STREETWEAR}),
    Occasion.DATE: frozenset({Style.EVENING, Style.CASUAL, Style.FORMAL}),
    Occasion.SPORTS: frozenset({Style.SPORTSWEAR}),
    Occasion.PARTY: frozenset({Style.EVENING, Style.CASUAL, Style.STREETWEAR}),
    Occasion.FORMAL: frozenset({Style.FORMAL, Style.BUSINESS, Style.EVENING}),
    Occasion.TRAVEL: frozenset({Style.CASUAL, Style.SPORTSWEAR}),
    Occasion.HOME: frozenset({Style.CASUAL, Style.SPORTSWEAR}),
}

_TAILORED = OutfitTemplate(
    required_categories=(Cat.TOPS, Cat.BOTTOMS, Cat.SHOES, Cat.OUTERWEAR, Cat.ACCESSORIES),
    minimum_items=3,
)
_DRESSY = OutfitTemplate(
    required_categories=(Cat.DRESSES, Cat.TOPS, Cat.BOTTOMS, Cat.SHOES, Cat.ACCESSORIES),
    minimum_items=2,
)
_ACTIVE = OutfitTemplate(required_categories=(Cat.ACTIVEWEAR, Cat.SHOES), minimum_items=2)
_EVERYDAY = OutfitTemplate(required_categories=(Cat.TOPS, Cat.BOTTOMS, Cat.SHOES), minimum_items=2)

OUTFIT_TEMPLATES: Dict[Occasion, OutfitTemplate] = {
    Occasion.WORK: _TAILORED,
    Occasion.FORMAL: _TAILORED,
    Occasion.DATE: _DRESSY,
    Occasion.PARTY: _DRESSY,
    Occasion.SPORTS: _ACTIVE,
    Occasion.CASUAL: _EVERYDAY,
    Occasion.TRAVEL: _EVERYDAY,
    Occasion.HOME: _EVERYDAY,
}


def template_for(occasion: Occasion) -> OutfitTemplate:
    return OUTFIT_TEMPLATES[occasion]


def styles_for(occasion: Occasion) -> FrozenSet[Style]:
    return OCCASION_STYLES[occasion]
