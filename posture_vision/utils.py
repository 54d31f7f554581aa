# Helper utilities
import math
from typing import Iterable, List, Mapping, Sequence


def contains_any(keywords: Iterable[str], terms: Sequence[str]) -> bool:
    """True when any keyword contains any term as a substring."""
    return any(term in keyword for keyword in keywords for term in terms)


def matched_terms(texts: Iterable[str], terms: Sequence[str]) -> List[str]:
    """Distinct terms found inside the given texts, in table order."""
    texts = list(texts)
    return [term for term in terms if any(term in text for text in texts)]


def clamp_score(score: int) -> int:
    # floor only, rules never add points
    return max(0, score)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def classify_band(value, bands: Mapping[str, float], fallback: str) -> str:
    """
    Map a value onto descending lower-bound bands.

    Args:
        value: Score to classify
        bands: {level: inclusive lower bound}, highest bound first
        fallback: Level used when the value is below every bound
    """
    for level, low in bands.items():
        if value >= low:
            return level
    return fallback
