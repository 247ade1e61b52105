"""Human-readable explanation for a recommended outfit.

The text is an ordered list of clause rules. Each rule decides whether it
applies to the scored outfit and renders one fragment from the locale's phrase
table; fragments are joined with ", " and closed with a period.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from wardrobe_recs.core.taxonomy import Occasion
from .types import ReasoningContext

DEFAULT_LOCALE = "en"

EXCELLENT_COLOR_THRESHOLD = 0.8
HARMONIOUS_COLOR_THRESHOLD = 0.6
CONSISTENT_STYLE_THRESHOLD = 0.8

PHRASES: Dict[str, Dict[str, object]] = {
    "en": {
        "weather_cold": "Given the cold weather ({temp}°C)",
        "weather_hot": "For hot weather ({temp}°C)",
        "weather_mild": "At a comfortable temperature ({temp}°C)",
        "occasion": {
            Occasion.WORK: "a business look was put together",
            Occasion.DATE: "a romantic look was created",
            Occasion.CASUAL: "an everyday set was assembled",
            Occasion.SPORTS: "sportswear was selected",
            Occasion.PARTY: "a festive outfit was prepared",
            Occasion.FORMAL: "a formal style was composed",
            Occasion.TRAVEL: "a comfortable travel look was assembled",
            Occasion.HOME: "homewear was selected",
        },
        "color_excellent": "with an excellent color combination",
        "color_harmonious": "with a harmonious color palette",
        "style_consistent": "in a single consistent style",
    },
    "ru": {
        "weather_cold": "Учитывая холодную погоду ({temp}°C)",
        "weather_hot": "Для жаркой погоды ({temp}°C)",
        "weather_mild": "При комфортной температуре ({temp}°C)",
        "occasion": {
            Occasion.WORK: "подобран деловой образ",
            Occasion.DATE: "создан романтичный образ",
            Occasion.CASUAL: "составлен повседневный комплект",
            Occasion.SPORTS: "выбрана спортивная одежда",
            Occasion.PARTY: "подготовлен праздничный наряд",
            Occasion.FORMAL: "сформирован формальный стиль",
            Occasion.TRAVEL: "собран комфортный образ для путешествия",
            Occasion.HOME: "выбрана домашняя одежда",
        },
        "color_excellent": "с отличным сочетанием цветов",
        "color_harmonious": "с гармоничной цветовой гаммой",
        "style_consistent": "в едином стиле",
    },
}


@dataclass(frozen=True)
class ClauseRule:
    name: str
    render: Callable[[ReasoningContext, Dict[str, object]], Optional[str]]


def _weather_clause(ctx: ReasoningContext, phrases: Dict[str, object]) -> Optional[str]:
    # truncated toward zero
    temp = int(ctx.weather.temperature_celsius)
    if ctx.weather.is_cold:
        key = "weather_cold"
    elif ctx.weather.is_hot:
        key = "weather_hot"
    else:
        key = "weather_mild"
    return str(phrases[key]).format(temp=temp)


def _occasion_clause(ctx: ReasoningContext, phrases: Dict[str, object]) -> Optional[str]:
    return phrases["occasion"][ctx.occasion]  # type: ignore[index]


def _color_clause(ctx: ReasoningContext, phrases: Dict[str, object]) -> Optional[str]:
    if ctx.color_harmony > EXCELLENT_COLOR_THRESHOLD:
        return str(phrases["color_excellent"])
    if ctx.color_harmony > HARMONIOUS_COLOR_THRESHOLD:
        return str(phrases["color_harmonious"])
    return None


def _style_clause(ctx: ReasoningContext, phrases: Dict[str, object]) -> Optional[str]:
    if ctx.style_consistency > CONSISTENT_STYLE_THRESHOLD:
        return str(phrases["style_consistent"])
    return None


DEFAULT_RULES: List[ClauseRule] = [
    ClauseRule("weather", _weather_clause),
    ClauseRule("occasion", _occasion_clause),
    ClauseRule("color", _color_clause),
    ClauseRule("style", _style_clause),
]


class ReasoningBuilder:
    """Renders the reasoning string for a scored outfit."""

    def __init__(self, locale: str = DEFAULT_LOCALE, rules: Optional[List[ClauseRule]] = None):
        self.locale = locale if locale in PHRASES else DEFAULT_LOCALE
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)

    def clauses(self, ctx: ReasoningContext) -> List[str]:
        phrases = PHRASES[self.locale]
        parts = []
        for rule in self.rules:
            text = rule.render(ctx, phrases)
            if text:
                parts.append(text)
        return parts

    def build(self, ctx: ReasoningContext) -> str:
        return ", ".join(self.clauses(ctx)) + "."
