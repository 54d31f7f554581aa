# Core scoring logic - weighted region aggregate and status bands
from typing import Dict, Tuple

from posture_vision import config
from posture_vision.models import DetailedAnalysis, PostureStatus, RiskLevel
from posture_vision.utils import classify_band, round_half_up


def posture_status(score: float) -> PostureStatus:
    return PostureStatus(classify_band(score, config.STATUS_BANDS, PostureStatus.POOR.value))


def risk_level(score: float) -> RiskLevel:
    return RiskLevel(classify_band(score, config.RISK_BANDS, RiskLevel.CRITICAL.value))


def compute_weighted_score(region_scores: Dict[str, float]) -> int:
    """
    Weighted sum of region scores, rounded half up.

    Args:
        region_scores: {region: score} for every key in REGION_WEIGHTS

    Returns:
        Aggregate score
    """
    total = 0.0
    for region in config.REGION_ORDER:
        total += region_scores[region] * config.REGION_WEIGHTS[region]
    return round_half_up(total)


def aggregate(analysis: DetailedAnalysis) -> Tuple[int, PostureStatus]:
    region_scores = {
        region: getattr(analysis, region).score
        for region in config.REGION_ORDER
    }
    score = compute_weighted_score(region_scores)
    return score, posture_status(score)
