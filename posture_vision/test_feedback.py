"""
Tests for feedback and recommendation composition
"""
import pytest

from posture_vision import rules
from posture_vision.feedback.builder import (
    compose_feedback,
    compose_recommendations,
    feedback_bracket,
    messages,
    no_person_feedback,
    recommendation_bracket,
    region_recommendations,
)
from posture_vision.feedback.rules import (
    BENDING_FEEDBACK,
    FEEDBACK_TEMPLATES,
    RECOMMENDATION_TEMPLATES,
    REGION_RECOMMENDATIONS,
    FeedbackBracket,
    RecommendationBracket,
)
from posture_vision.models import DetailedAnalysis, RegionScore, Severity


def _analysis(head_neck=100, shoulders=100, spine=100, hips=100, overall=100, spine_issues=()):
    return DetailedAnalysis(
        head_neck=RegionScore(score=head_neck),
        shoulders=RegionScore(score=shoulders),
        spine=RegionScore(score=spine, issues=list(spine_issues)),
        hips=RegionScore(score=hips),
        overall=RegionScore(score=overall),
    )


@pytest.mark.parametrize("score,expected", [
    (0, FeedbackBracket.CRITICAL),
    (24, FeedbackBracket.CRITICAL),
    (25, FeedbackBracket.POOR),
    (49, FeedbackBracket.POOR),
    (50, FeedbackBracket.FAIR),
    (69, FeedbackBracket.FAIR),
    (70, FeedbackBracket.GOOD),
    (84, FeedbackBracket.GOOD),
    (85, FeedbackBracket.EXCELLENT),
    (100, FeedbackBracket.EXCELLENT),
])
def test_feedback_brackets(score, expected):
    assert feedback_bracket(score) == expected


@pytest.mark.parametrize("score,expected", [
    (29, RecommendationBracket.URGENT),
    (30, RecommendationBracket.IMPROVE),
    (59, RecommendationBracket.IMPROVE),
    (60, None),
])
def test_recommendation_brackets(score, expected):
    assert recommendation_bracket(score) == expected


def test_feedback_uses_bracket_templates():
    items = compose_feedback(72, _analysis())

    assert items == list(FEEDBACK_TEMPLATES[FeedbackBracket.GOOD])


def test_bending_lines_are_appended_in_any_bracket():
    analysis = _analysis(spine=20, spine_issues=[rules.SPINE_BENDING_ISSUE])

    items = compose_feedback(90, analysis)

    assert items[:3] == list(FEEDBACK_TEMPLATES[FeedbackBracket.EXCELLENT])
    assert items[3:] == list(BENDING_FEEDBACK)


def test_bent_body_issue_also_counts_as_bending():
    analysis = _analysis(spine=30, spine_issues=[rules.SPINE_BENT_BODY_ISSUE])

    assert len(compose_feedback(40, analysis)) == 3 + len(BENDING_FEEDBACK)


def test_no_recommendations_for_a_clean_high_score():
    assert compose_recommendations(100, _analysis()) == []


def test_region_recommendation_threshold():
    at_threshold = compose_recommendations(90, _analysis(shoulders=70))
    below = compose_recommendations(90, _analysis(shoulders=69))

    assert at_threshold == []
    assert below == list(REGION_RECOMMENDATIONS["shoulders"])


def test_overall_region_never_adds_recommendations():
    assert compose_recommendations(90, _analysis(overall=0)) == []


def test_recommendations_follow_region_order():
    items = compose_recommendations(20, _analysis(head_neck=10, spine=10, hips=10))

    assert items == (
        list(RECOMMENDATION_TEMPLATES[RecommendationBracket.URGENT])
        + list(REGION_RECOMMENDATIONS["head_neck"])
        + list(REGION_RECOMMENDATIONS["spine"])
        + list(REGION_RECOMMENDATIONS["hips"])
    )


def test_no_person_feedback_reports_confidence_with_two_decimals():
    assert messages(no_person_feedback(57))[1] == "📊 Detection confidence: 57.00%"
    assert messages(no_person_feedback(-10.0))[1] == "📊 Detection confidence: -10.00%"


def test_every_item_carries_a_severity():
    items = (
        compose_feedback(10, _analysis(spine=0, spine_issues=[rules.SPINE_BENDING_ISSUE]))
        + compose_recommendations(10, _analysis(0, 0, 0, 0, 0))
        + no_person_feedback(12.5)
    )

    assert items
    assert all(isinstance(item.severity, Severity) for item in items)
    assert all(item.message for item in items)


def test_region_recommendations_threshold():
    assert region_recommendations("head_neck", 70) == []
    assert region_recommendations("head_neck", 69) == messages(REGION_RECOMMENDATIONS["head_neck"])
    assert region_recommendations("overall", 0) == []
