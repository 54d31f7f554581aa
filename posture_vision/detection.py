# Person Detection - multi-layer point accumulation (Procedural)
import math

from posture_vision import config, logger
from posture_vision.models import DetectionVerdict, RawAnnotations
from posture_vision.rules import (
    BODY_PART_TERMS,
    CLOTHING_TERMS,
    PERSON_OBJECT_NAME,
    PRIMARY_PERSON_TERMS,
)
from posture_vision.utils import contains_any, matched_terms


def _layer_points(layer: str, count: int) -> int:
    cfg = config.DETECTION_LAYERS[layer]
    if count < cfg.get("min_matches", 1):
        return 0
    return min(cfg["cap"], math.floor(count * cfg["points_each"]))


def detect_person(raw: RawAnnotations) -> DetectionVerdict:
    """
    Decide whether a person is in the image.

    Every layer adds points independently against a 100 point budget:
    primary person labels, localized "person" objects, body-part labels,
    clothing labels and faces. A flat image (few dominant colors) costs
    points. The total is reported as-is, so the confidence can leave the
    0-100 range.

    Args:
        raw: Annotation bag for one image

    Returns:
        DetectionVerdict (detected when total >= DETECTION_THRESHOLD)
    """
    points = {}

    # STEP 1: primary person labels (strict floor)
    primary_labels = [
        label for label in raw.labels
        if label.confidence > config.PRIMARY_PERSON_CONFIDENCE_FLOOR
        and contains_any([label.description.lower()], PRIMARY_PERSON_TERMS)
    ]
    points["primary_labels"] = _layer_points("primary_labels", len(primary_labels))

    # STEP 2: localized objects named exactly "person"
    person_objects = [
        obj for obj in raw.objects
        if obj.name.lower() == PERSON_OBJECT_NAME
        and obj.confidence > config.PRIMARY_PERSON_CONFIDENCE_FLOOR
    ]
    points["object_localization"] = _layer_points("object_localization", len(person_objects))

    # STEP 3 + 4: body parts and clothing (distinct terms)
    label_texts = [
        label.description.lower() for label in raw.labels
        if label.confidence > config.KEYWORD_CONFIDENCE_FLOOR
    ]
    body_parts = matched_terms(label_texts, BODY_PART_TERMS)
    clothing = matched_terms(label_texts, CLOTHING_TERMS)
    points["body_parts"] = _layer_points("body_parts", len(body_parts))
    points["clothing"] = _layer_points("clothing", len(clothing))

    # STEP 5: faces
    faces = raw.faces or ()
    points["face_detection"] = _layer_points("face_detection", len(faces))

    total_points = sum(points.values())

    # STEP 6: image quality penalty (not a gate)
    color_count = raw.dominant_color_count or 0
    if color_count < config.IMAGE_QUALITY_MIN_COLORS:
        total_points -= config.IMAGE_QUALITY_PENALTY

    confidence_percent = total_points * 100 / config.DETECTION_BUDGET
    detected = total_points >= config.DETECTION_THRESHOLD
    methods = [layer for layer, value in points.items() if value > 0]

    logger.log_detect("Person Detected" if detected else "No Person Detected", {
        "total_points": total_points,
        "methods": ", ".join(methods) or "none",
        "dominant_colors": color_count,
    })

    return DetectionVerdict(
        detected=detected,
        confidence_percent=confidence_percent,
        detection_methods=methods,
        body_parts_found=body_parts,
        clothing_found=clothing,
        face_count=len(faces),
    )
