# Annotation extraction - vision payload -> keywords + face geometry
from typing import Any, Dict, Optional

from posture_vision import config, logger
from posture_vision.models import ExtractedFeatures, RawAnnotations


def parse_vision_response(payload: Dict[str, Any]) -> RawAnnotations:
    """
    Build RawAnnotations from an images:annotate response body.

    Only the first entry of ``responses`` is read. Missing sections become
    empty sequences; a missing imagePropertiesAnnotation leaves the color
    count unset.
    """
    responses = payload.get("responses") or [{}]
    first = responses[0] or {}

    properties = first.get("imagePropertiesAnnotation") or {}
    colors: Optional[list] = (properties.get("dominantColors") or {}).get("colors")

    return RawAnnotations.model_validate({
        "labels": first.get("labelAnnotations") or [],
        "objects": first.get("localizedObjectAnnotations") or [],
        "faces": first.get("faceAnnotations"),
        "dominantColorCount": len(colors) if colors is not None else None,
    })


def extract_features(raw: RawAnnotations) -> ExtractedFeatures:
    """
    Collapse labels and objects into a lower-cased keyword set.

    Args:
        raw: Annotation bag for one image

    Returns:
        ExtractedFeatures with confidence-filtered keywords, the face
        geometry untouched and the dominant color count (0 when unknown)
    """
    floor = config.KEYWORD_CONFIDENCE_FLOOR

    keywords = {
        label.description.lower()
        for label in raw.labels
        if label.description and label.confidence > floor
    }
    keywords.update(
        obj.name.lower()
        for obj in raw.objects
        if obj.name and obj.confidence > floor
    )

    features = ExtractedFeatures(
        keywords=frozenset(keywords),
        faces=tuple(raw.faces or ()),
        dominant_color_count=raw.dominant_color_count or 0,
    )

    logger.log_debug("Keywords Extracted", {
        "keywords": ", ".join(sorted(features.keywords)),
        "faces": len(features.faces),
        "dominant_colors": features.dominant_color_count,
    })

    return features
