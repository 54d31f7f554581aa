# Region analyzers - keyword penalties per body region
from typing import FrozenSet, List, Sequence

from posture_vision import config, logger
from posture_vision.feedback.builder import region_recommendations
from posture_vision.models import DetailedAnalysis, ExtractedFeatures, RegionScore
from posture_vision.rules import (
    HEAD_FORWARD_RULE,
    HEAD_PAN_ISSUE,
    HEAD_PAN_PENALTY,
    HEAD_TILT_ISSUE,
    HEAD_TILT_PENALTY,
    HIP_PROFILE,
    LOW_DETAIL_ISSUE,
    LOW_DETAIL_PENALTY,
    NECK_STRAIN_RULE,
    NO_FACE_ISSUE,
    NO_FACE_PENALTY,
    OVERALL_RULES,
    PenaltyRule,
    RegionProfile,
    SHOULDER_PROFILE,
    SPINE_PROFILE,
)
from posture_vision.scoring import risk_level
from posture_vision.utils import clamp_score, contains_any


class _Tally:
    """Running penalty total and issues for one region."""

    def __init__(self):
        self.penalty = 0
        self.issues: List[str] = []

    def add(self, penalty: int, issue: str):
        self.penalty += penalty
        self.issues.append(issue)

    def apply(self, rules: Sequence[PenaltyRule], keywords: FrozenSet[str]):
        for rule in rules:
            if _rule_matches(rule, keywords):
                self.add(rule.penalty, rule.issue)

    def result(self) -> RegionScore:
        score = clamp_score(100 - self.penalty)
        return RegionScore(score=score, issues=self.issues, risk_level=risk_level(score))


def _rule_matches(rule: PenaltyRule, keywords: FrozenSet[str]) -> bool:
    if not contains_any(keywords, rule.terms):
        return False
    return not rule.requires or contains_any(keywords, rule.requires)


def _score_profile(profile: RegionProfile, keywords: FrozenSet[str]) -> RegionScore:
    tally = _Tally()

    if contains_any(keywords, profile.prerequisite):
        tally.apply(profile.rules, keywords)
    else:
        tally.add(profile.missing.penalty, profile.missing.issue)

    tally.apply(profile.trailing, keywords)
    return tally.result()


def analyze_head_neck(features: ExtractedFeatures) -> RegionScore:
    """Head and neck: keyword checks plus face angles from the first face."""
    keywords = features.keywords
    tally = _Tally()

    tally.apply([HEAD_FORWARD_RULE], keywords)

    if features.faces:
        face = features.faces[0]
        if abs(face.tilt_angle) > config.MAX_HEAD_TILT_DEGREES:
            tally.add(HEAD_TILT_PENALTY, HEAD_TILT_ISSUE)
        if abs(face.pan_angle) > config.MAX_HEAD_PAN_DEGREES:
            tally.add(HEAD_PAN_PENALTY, HEAD_PAN_ISSUE)
    else:
        tally.add(NO_FACE_PENALTY, NO_FACE_ISSUE)

    tally.apply([NECK_STRAIN_RULE], keywords)
    return tally.result()


def analyze_shoulders(features: ExtractedFeatures) -> RegionScore:
    return _score_profile(SHOULDER_PROFILE, features.keywords)


def analyze_spine(features: ExtractedFeatures) -> RegionScore:
    return _score_profile(SPINE_PROFILE, features.keywords)


def analyze_hips(features: ExtractedFeatures) -> RegionScore:
    return _score_profile(HIP_PROFILE, features.keywords)


def analyze_overall(features: ExtractedFeatures) -> RegionScore:
    """Whole-body keywords plus a penalty for low-detail images."""
    tally = _Tally()
    tally.apply(OVERALL_RULES, features.keywords)

    if features.dominant_color_count < config.OVERALL_MIN_COLORS:
        tally.add(LOW_DETAIL_PENALTY, LOW_DETAIL_ISSUE)

    return tally.result()


def analyze_regions(features: ExtractedFeatures) -> DetailedAnalysis:
    """
    Run all five region analyzers.

    Args:
        features: Extracted keywords and face geometry

    Returns:
        DetailedAnalysis with one RegionScore per region
    """
    analysis = DetailedAnalysis(
        head_neck=analyze_head_neck(features),
        shoulders=analyze_shoulders(features),
        spine=analyze_spine(features),
        hips=analyze_hips(features),
        overall=analyze_overall(features),
    )

    for region in config.REGION_ORDER:
        result = getattr(analysis, region)
        result.recommendations = region_recommendations(region, result.score)
        logger.log_debug(f"Region Scored: {region}", {
            "score": result.score,
            "issues": len(result.issues),
            "risk_level": result.risk_level.value,
        })

    logger.log_region("Regions Analyzed", {
        region: getattr(analysis, region).score for region in config.REGION_ORDER
    })

    return analysis
