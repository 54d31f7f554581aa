from typing import Iterable, List, Optional

from posture_vision import logger
from posture_vision.feedback.rules import (
    BENDING_FEEDBACK,
    FEEDBACK_BRACKETS,
    FEEDBACK_TEMPLATES,
    NO_PERSON_FEEDBACK,
    RECOMMENDATION_BRACKETS,
    RECOMMENDATION_TEMPLATES,
    REGION_RECOMMENDATION_THRESHOLD,
    REGION_RECOMMENDATIONS,
    FeedbackBracket,
    RecommendationBracket,
)
from posture_vision.models import DetailedAnalysis, FeedbackItem
from posture_vision.rules import SPINE_BENDING_ISSUES


def feedback_bracket(score: int) -> FeedbackBracket:
    for upper, bracket in FEEDBACK_BRACKETS:
        if score < upper:
            return bracket
    return FeedbackBracket.EXCELLENT


def recommendation_bracket(score: int) -> Optional[RecommendationBracket]:
    for upper, bracket in RECOMMENDATION_BRACKETS:
        if score < upper:
            return bracket
    return None


def has_bending_issue(analysis: DetailedAnalysis) -> bool:
    return any(issue in SPINE_BENDING_ISSUES for issue in analysis.spine.issues)


def compose_feedback(score: int, analysis: DetailedAnalysis) -> List[FeedbackItem]:
    """
    Feedback for the aggregate score.

    The bracket templates come first; bending lines are appended whenever
    the spine reported forward bending, whatever the bracket.
    """
    items = list(FEEDBACK_TEMPLATES[feedback_bracket(score)])

    if has_bending_issue(analysis):
        items.extend(BENDING_FEEDBACK)

    return items


def compose_recommendations(score: int, analysis: DetailedAnalysis) -> List[FeedbackItem]:
    """
    General advice scaled by urgency, then two lines for each of
    head/neck, shoulders, spine and hips scoring below the region threshold.
    """
    items: List[FeedbackItem] = []

    bracket = recommendation_bracket(score)
    if bracket is not None:
        items.extend(RECOMMENDATION_TEMPLATES[bracket])

    for region, region_items in REGION_RECOMMENDATIONS.items():
        if getattr(analysis, region).score < REGION_RECOMMENDATION_THRESHOLD:
            items.extend(region_items)

    logger.log_feedback("Composed Recommendations", {
        "score": score,
        "bracket": bracket.value if bracket else "none",
        "count": len(items),
    })

    return items


def region_recommendations(region: str, score: int) -> List[str]:
    """Region-specific advice for a region scoring below the threshold."""
    if score >= REGION_RECOMMENDATION_THRESHOLD:
        return []
    return messages(REGION_RECOMMENDATIONS.get(region, ()))


def no_person_feedback(confidence_percent: float) -> List[FeedbackItem]:
    return [
        item.model_copy(update={"message": item.message.format(confidence=confidence_percent)})
        for item in NO_PERSON_FEEDBACK
    ]


def messages(items: Iterable[FeedbackItem]) -> List[str]:
    return [item.message for item in items]
