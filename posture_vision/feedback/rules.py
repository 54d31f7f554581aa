# Feedback and recommendation templates, keyed by score bracket.
# Messages are emitted verbatim; severity travels alongside as a typed field.
from enum import Enum

from posture_vision.models import FeedbackItem, Severity


class FeedbackBracket(str, Enum):
    CRITICAL = "critical"
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


class RecommendationBracket(str, Enum):
    URGENT = "urgent"
    IMPROVE = "improve"


def _item(severity: Severity, message: str) -> FeedbackItem:
    return FeedbackItem(severity=severity, message=message)


# (exclusive upper bound, bracket) - checked in order
FEEDBACK_BRACKETS = (
    (25, FeedbackBracket.CRITICAL),
    (50, FeedbackBracket.POOR),
    (70, FeedbackBracket.FAIR),
    (85, FeedbackBracket.GOOD),
)

RECOMMENDATION_BRACKETS = (
    (30, RecommendationBracket.URGENT),
    (60, RecommendationBracket.IMPROVE),
)

REGION_RECOMMENDATION_THRESHOLD = 70


FEEDBACK_TEMPLATES = {
    FeedbackBracket.CRITICAL: (
        _item(Severity.CRITICAL, "💀 Critical posture problems detected - your position puts serious strain on your body"),
        _item(Severity.CRITICAL, "🚨 Multiple body regions are far out of alignment"),
        _item(Severity.CRITICAL, "❌ Stop and reset your position before continuing"),
    ),
    FeedbackBracket.POOR: (
        _item(Severity.CRITICAL, "🚨 Poor posture detected - several areas need attention"),
        _item(Severity.WARNING, "⚠️ Your body is noticeably out of neutral alignment"),
        _item(Severity.INFO, "💡 Small adjustments now can prevent pain later"),
    ),
    FeedbackBracket.FAIR: (
        _item(Severity.WARNING, "⚠️ Fair posture with room for improvement"),
        _item(Severity.INFO, "💡 Some regions show mild misalignment"),
    ),
    FeedbackBracket.GOOD: (
        _item(Severity.SUCCESS, "✅ Good posture overall"),
        _item(Severity.INFO, "💡 A few minor adjustments would make it excellent"),
    ),
    FeedbackBracket.EXCELLENT: (
        _item(Severity.SUCCESS, "✅ Excellent posture - well aligned from head to hips"),
        _item(Severity.SUCCESS, "✅ Keep up the good habits"),
        _item(Severity.INFO, "💪 Your position looks balanced and relaxed"),
    ),
}

BENDING_FEEDBACK = (
    _item(Severity.CRITICAL, "🚨 Forward bending detected - your spine is carrying extra load"),
    _item(Severity.WARNING, "⚠️ Prolonged bending increases the risk of lower back pain"),
    _item(Severity.INFO, "💡 Hinge at the hips and keep your back straight when reaching forward"),
    _item(Severity.INFO, "💡 Stand tall and stack your shoulders over your hips"),
)


RECOMMENDATION_TEMPLATES = {
    RecommendationBracket.URGENT: (
        _item(Severity.CRITICAL, "🚨 Correct your position now: sit or stand tall with your back supported"),
        _item(Severity.WARNING, "🩺 Consider seeing a physiotherapist if you feel pain or stiffness"),
        _item(Severity.INFO, "⏱️ Take a posture break every 20 minutes"),
    ),
    RecommendationBracket.IMPROVE: (
        _item(Severity.WARNING, "⚠️ Reset your posture regularly throughout the day"),
        _item(Severity.INFO, "🧘 Add daily stretches for your neck, shoulders and back"),
        _item(Severity.INFO, "🪑 Check your workstation: screen at eye level, feet flat on the floor"),
    ),
}

REGION_RECOMMENDATIONS = {
    "head_neck": (
        _item(Severity.INFO, "🧘 Practice chin tucks: gently draw your chin back 10 times, a few times a day"),
        _item(Severity.INFO, "🖥️ Raise your screen so the top third sits at eye level"),
    ),
    "shoulders": (
        _item(Severity.INFO, "🧘 Do shoulder blade squeezes and doorway chest stretches"),
        _item(Severity.INFO, "💡 Relax your shoulders down and away from your ears"),
    ),
    "spine": (
        _item(Severity.INFO, "🧘 Try cat-cow stretches and thoracic extensions to mobilize your spine"),
        _item(Severity.INFO, "🪑 Use lumbar support and keep your back against the chair"),
    ),
    "hips": (
        _item(Severity.INFO, "🧘 Stretch your hip flexors and strengthen your glutes with bridges"),
        _item(Severity.INFO, "💡 Spread your weight evenly across both feet or sit bones"),
    ),
}


# ============================================================================
# CANNED VERDICTS
# ============================================================================

NO_PERSON_FEEDBACK = (
    _item(Severity.CRITICAL, "❌ No person detected in the image"),
    _item(Severity.INFO, "📊 Detection confidence: {confidence:.2f}%"),
    _item(Severity.INFO, "💡 Make sure your whole upper body is visible in the frame"),
    _item(Severity.INFO, "💡 Improve the lighting and avoid strong backlight"),
    _item(Severity.INFO, "💡 Stand 1-2 meters from the camera, facing it directly"),
)

NO_PERSON_RECOMMENDATIONS = (
    _item(Severity.INFO, "Position yourself in the center of the frame"),
    _item(Severity.INFO, "Use a plain, well-lit background"),
    _item(Severity.INFO, "Retake the photo once you are fully visible"),
)

DEGRADED_FEEDBACK = (
    _item(Severity.WARNING, "⚠️ Posture analysis could not be completed"),
    _item(Severity.INFO, "💡 Showing a basic assessment instead"),
    _item(Severity.INFO, "💡 Try again with a clearer photo"),
)

DEGRADED_RECOMMENDATIONS = (
    _item(Severity.INFO, "Maintain good posture throughout the day"),
    _item(Severity.INFO, "Take regular breaks to stretch"),
    _item(Severity.INFO, "Consider ergonomic adjustments"),
)
