# Posture Engine - orchestrates extraction, detection, scoring and feedback
from enum import Enum
from typing import Any, Dict

from pydantic import ValidationError

from posture_vision import config, logger
from posture_vision.detection import detect_person
from posture_vision.extraction import extract_features, parse_vision_response
from posture_vision.feedback.builder import (
    compose_feedback,
    compose_recommendations,
    messages,
    no_person_feedback,
)
from posture_vision.feedback.rules import (
    DEGRADED_FEEDBACK,
    DEGRADED_RECOMMENDATIONS,
    NO_PERSON_RECOMMENDATIONS,
)
from posture_vision.models import (
    AnalysisMetadata,
    DetectionVerdict,
    ExtractedFeatures,
    PostureStatus,
    PostureVerdict,
    RawAnnotations,
)
from posture_vision.regions import analyze_regions
from posture_vision.scoring import aggregate


class AnalysisStage(str, Enum):
    NOT_STARTED = "not_started"
    EXTRACTING_ANNOTATIONS = "extracting_annotations"
    DETECTING_PERSON = "detecting_person"
    NO_PERSON = "no_person"
    ANALYZING_REGIONS = "analyzing_regions"
    AGGREGATING = "aggregating"
    COMPOSING_FEEDBACK = "composing_feedback"
    DONE = "done"
    DEGRADED = "degraded"


def _enter(stage: AnalysisStage) -> AnalysisStage:
    logger.log_debug(f"Stage: {stage.value}")
    return stage


def _confidence(detection: DetectionVerdict) -> float:
    return min(1.0, max(0.0, detection.confidence_percent / 100))


def _metadata(features: ExtractedFeatures, detection: DetectionVerdict) -> AnalysisMetadata:
    return AnalysisMetadata(
        dominant_color_count=features.dominant_color_count,
        keyword_count=len(features.keywords),
        detection_confidence=detection.confidence_percent,
        detection_methods=detection.detection_methods,
    )


def no_person_verdict(features: ExtractedFeatures, detection: DetectionVerdict) -> PostureVerdict:
    feedback_items = no_person_feedback(detection.confidence_percent)
    return PostureVerdict(
        score=config.NO_PERSON_SCORE,
        status=PostureStatus.POOR,
        feedback=messages(feedback_items),
        recommendations=messages(NO_PERSON_RECOMMENDATIONS),
        confidence=_confidence(detection),
        person_detected=False,
        face_detected=bool(features.faces),
        feedback_items=feedback_items,
        recommendation_items=list(NO_PERSON_RECOMMENDATIONS),
        detection=detection,
        analysis_metadata=_metadata(features, detection),
    )


def degraded_verdict() -> PostureVerdict:
    return PostureVerdict(
        score=config.DEGRADED_SCORE,
        status=PostureStatus.POOR,
        feedback=messages(DEGRADED_FEEDBACK),
        recommendations=messages(DEGRADED_RECOMMENDATIONS),
        confidence=config.DEGRADED_CONFIDENCE,
        person_detected=False,
        face_detected=False,
        feedback_items=list(DEGRADED_FEEDBACK),
        recommendation_items=list(DEGRADED_RECOMMENDATIONS),
    )


def analyze(raw: RawAnnotations) -> PostureVerdict:
    """
    Score posture for one image's annotations.

    Never raises: a missing person yields the no-person verdict and any
    fault while scoring yields the degraded verdict.

    Args:
        raw: Annotation bag for one image

    Returns:
        PostureVerdict
    """
    stage = AnalysisStage.NOT_STARTED

    try:
        # 1️⃣ Keywords + face geometry
        stage = _enter(AnalysisStage.EXTRACTING_ANNOTATIONS)
        features = extract_features(raw)

        # 2️⃣ Person gate
        stage = _enter(AnalysisStage.DETECTING_PERSON)
        detection = detect_person(raw)

        if not detection.detected:
            stage = _enter(AnalysisStage.NO_PERSON)
            return no_person_verdict(features, detection)

        # 3️⃣ Regions
        stage = _enter(AnalysisStage.ANALYZING_REGIONS)
        analysis = analyze_regions(features)

        # 4️⃣ Aggregate
        stage = _enter(AnalysisStage.AGGREGATING)
        score, status = aggregate(analysis)
        logger.log_engine("Aggregate Computed", {
            "score": score,
            "status": status.value,
            "spine": analysis.spine.score,
        })

        # 5️⃣ Feedback
        stage = _enter(AnalysisStage.COMPOSING_FEEDBACK)
        feedback_items = compose_feedback(score, analysis)
        recommendation_items = compose_recommendations(score, analysis)

        stage = _enter(AnalysisStage.DONE)
        return PostureVerdict(
            score=score,
            status=status,
            feedback=messages(feedback_items),
            recommendations=messages(recommendation_items),
            confidence=_confidence(detection),
            person_detected=True,
            face_detected=bool(features.faces),
            detailed_analysis=analysis,
            feedback_items=feedback_items,
            recommendation_items=recommendation_items,
            detection=detection,
            analysis_metadata=_metadata(features, detection),
        )

    except Exception as e:
        logger.log_error("Posture Analysis Failed", e, {"stage": stage.value})
        _enter(AnalysisStage.DEGRADED)
        return degraded_verdict()


def analyze_vision_response(payload: Dict[str, Any]) -> PostureVerdict:
    """Parse an images:annotate response body and analyze it."""
    try:
        raw = parse_vision_response(payload)
    except (ValidationError, AttributeError, IndexError, TypeError) as e:
        logger.log_error("Annotation Parse Failed", e)
        return degraded_verdict()
    return analyze(raw)
