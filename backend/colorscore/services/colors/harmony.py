"""
Pairwise color harmony scoring.

Every unordered pair of palette colors gets three sub-scores:

* hue: 100 for analogous colors (circular distance ≤ 30°), 90 for
  complementary colors (150°-210°), otherwise ``max(0, 60 - distance)``.
  The three branches are deliberately not joined smoothly.
* value: the absolute brightness difference (contrast is rewarded).
* saturation: 100 minus the absolute saturation difference.

The weighted pair scores are averaged into the palette score. A palette with
fewer than two colors is trivially harmonious and scores exactly 100.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import List, Sequence, Tuple

from .conversion import HSVColor

# Pair score weights
HUE_WEIGHT = 0.5
VALUE_WEIGHT = 0.3
SATURATION_WEIGHT = 0.2

# Hue bands (degrees of circular distance)
ANALOGOUS_MAX_DISTANCE = 30.0
COMPLEMENTARY_MIN_DISTANCE = 150.0
COMPLEMENTARY_MAX_DISTANCE = 210.0
ANALOGOUS_SCORE = 100.0
COMPLEMENTARY_SCORE = 90.0
DISSONANT_BASE = 60.0

# Score for palettes with no pairs
MAX_SCORE = 100.0


@dataclass(frozen=True)
class HarmonyWeights:
    """Relative weights of the hue, value and saturation sub-scores."""
    hue: float = HUE_WEIGHT
    value: float = VALUE_WEIGHT
    saturation: float = SATURATION_WEIGHT


DEFAULT_WEIGHTS = HarmonyWeights()


@dataclass(frozen=True)
class PairScore:
    """Sub-scores and weighted total for one pair of palette colors."""
    i: int
    j: int
    hue_distance: float
    hue_score: float
    value_score: float
    saturation_score: float
    score: float


def get_hue_distance(h1: float, h2: float) -> float:
    """
    Circular distance between two hues in degrees.

    Returns:
        Distance in [0, 180] for hues in [0, 360)
    """
    diff = abs(h1 - h2)
    return min(diff, 360.0 - diff)


def calculate_hue_score(h1: float, h2: float) -> float:
    """Score hue relationship of two colors (analogous/complementary bands)."""
    distance = get_hue_distance(h1, h2)
    if distance <= ANALOGOUS_MAX_DISTANCE:
        return ANALOGOUS_SCORE
    if COMPLEMENTARY_MIN_DISTANCE <= distance <= COMPLEMENTARY_MAX_DISTANCE:
        return COMPLEMENTARY_SCORE
    return max(0.0, DISSONANT_BASE - distance)


def calculate_value_score(v1: float, v2: float) -> float:
    """Brightness contrast: larger value difference scores higher."""
    return abs(v1 - v2)


def calculate_saturation_score(s1: float, s2: float) -> float:
    """Saturation consistency: larger saturation difference scores lower."""
    return 100.0 - abs(s1 - s2)


def generate_color_pairs(k: int) -> List[Tuple[int, int]]:
    """All C(k, 2) unordered index pairs (i < j)."""
    return list(combinations(range(k), 2))


def score_pair(c1: HSVColor, c2: HSVColor, weights: HarmonyWeights = DEFAULT_WEIGHTS) -> float:
    """Weighted harmony score for a single pair of HSV colors."""
    hue_score = calculate_hue_score(c1.h, c2.h)
    value_score = calculate_value_score(c1.v, c2.v)
    saturation_score = calculate_saturation_score(c1.s, c2.s)
    return (hue_score * weights.hue
            + value_score * weights.value
            + saturation_score * weights.saturation)


def score_palette_breakdown(colors: Sequence[HSVColor],
                            weights: HarmonyWeights = DEFAULT_WEIGHTS) -> List[PairScore]:
    """
    Per-pair sub-scores for a palette.

    Args:
        colors: HSV palette colors
        weights: Sub-score weights

    Returns:
        One PairScore per unordered pair, in (i, j) lexicographic order
    """
    breakdown = []
    for i, j in generate_color_pairs(len(colors)):
        c1, c2 = colors[i], colors[j]
        breakdown.append(PairScore(
            i=i,
            j=j,
            hue_distance=get_hue_distance(c1.h, c2.h),
            hue_score=calculate_hue_score(c1.h, c2.h),
            value_score=calculate_value_score(c1.v, c2.v),
            saturation_score=calculate_saturation_score(c1.s, c2.s),
            score=score_pair(c1, c2, weights)
        ))
    return breakdown


def mean_pair_score(breakdown: Sequence[PairScore]) -> float:
    """Average of the pair scores; exactly 100.0 when there are no pairs."""
    if not breakdown:
        return MAX_SCORE
    return sum(pair.score for pair in breakdown) / len(breakdown)


def score_palette(colors: Sequence[HSVColor], weights: HarmonyWeights = DEFAULT_WEIGHTS) -> float:
    """
    Mean pair score over all color pairs, at full precision.

    Returns:
        Harmony score; exactly 100.0 when fewer than two colors are given
    """
    return mean_pair_score(score_palette_breakdown(colors, weights))
