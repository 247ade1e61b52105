from itertools import combinations
from typing import FrozenSet, Iterable, List, Optional, Sequence

from wardrobe_recs.core.taxonomy import ClothingColor as C

NEUTRALS: FrozenSet[C] = frozenset({C.BLACK, C.WHITE, C.GRAY, C.BEIGE, C.NAVY})

COMPLEMENTARY_PAIRS: FrozenSet[FrozenSet[C]] = frozenset(
    frozenset(p)
    for p in [
        (C.BLUE, C.ORANGE),
        (C.RED, C.GREEN),
        (C.YELLOW, C.PURPLE),
        (C.PINK, C.GREEN),
        (C.BLUE, C.YELLOW),
    ]
)

ANALOGOUS_PAIRS: FrozenSet[FrozenSet[C]] = frozenset(
    frozenset(p)
    for p in [
        (C.BLUE, C.PURPLE),
        (C.BLUE, C.GREEN),
        (C.RED, C.ORANGE),
        (C.RED, C.PINK),
        (C.YELLOW, C.ORANGE),
        (C.YELLOW, C.GREEN),
    ]
)

NEUTRAL_SCORE = 1.0
SAME_COLOR_SCORE = 0.8
COMPLEMENTARY_SCORE = 0.9
ANALOGOUS_SCORE = 0.85
DEFAULT_SCORE = 0.6
UNKNOWN_SCORE = 0.5


def color_harmony(c1: C, c2: C) -> float:
    """Symmetric pairwise harmony between two garment colors, in [0, 1]."""
    if c1 in NEUTRALS or c2 in NEUTRALS:
        return NEUTRAL_SCORE
    if c1 == c2:
        return SAME_COLOR_SCORE
    pair = frozenset((c1, c2))
    if pair in COMPLEMENTARY_PAIRS:
        return COMPLEMENTARY_SCORE
    if pair in ANALOGOUS_PAIRS:
        return ANALOGOUS_SCORE
    return DEFAULT_SCORE


def outfit_color_harmony(colors: Iterable[Optional[C]]) -> float:
    """Mean harmony over all unordered pairs of recognized colors.

    Fewer than two recognized colors scores 0.5.
    """
    known: List[C] = [c for c in colors if c is not None]
    pairs = list(combinations(known, 2))
    if not pairs:
        return UNKNOWN_SCORE
    return sum(color_harmony(a, b) for a, b in pairs) / len(pairs)


def compatibility_with(color: Optional[C], existing: Sequence[Optional[C]]) -> float:
    """How well a candidate color sits next to the colors already chosen.

    Unrecognized existing colors add nothing but still count in the mean.
    """
    if color is None or not existing:
        return UNKNOWN_SCORE
    total = sum(color_harmony(color, other) for other in existing if other is not None)
    return total / len(existing)
