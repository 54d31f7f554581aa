"""
Shared fixtures: provider payloads and annotation builders
"""
from typing import Optional, Sequence, Tuple

import pytest

from posture_vision.extraction import parse_vision_response
from posture_vision.models import ExtractedFeatures, FaceAnnotation, RawAnnotations


def _payload(labels, objects, faces, colors):
    response = {
        "labelAnnotations": [
            {"mid": f"/m/{i}", "description": d, "score": s, "topicality": s}
            for i, (d, s) in enumerate(labels)
        ],
        "localizedObjectAnnotations": [
            {"name": n, "score": s, "boundingPoly": {"normalizedVertices": []}}
            for n, s in objects
        ],
        "faceAnnotations": faces,
    }
    if colors is not None:
        response["imagePropertiesAnnotation"] = {
            "dominantColors": {
                "colors": [
                    {"color": {"red": 20 * i, "green": 100, "blue": 150}, "score": 0.1, "pixelFraction": 0.1}
                    for i in range(colors)
                ]
            }
        }
    return {"responses": [response]}


@pytest.fixture
def upright_payload():
    """Person standing straight, well lit - detected with 72 points"""
    return _payload(
        labels=[
            ("Person", 0.95), ("Human", 0.92), ("Standing", 0.88), ("Head", 0.85),
            ("Shoulder", 0.82), ("Spine", 0.80), ("Hip", 0.78), ("Shirt", 0.75),
            ("Jeans", 0.70),
        ],
        objects=[("Person", 0.93)],
        faces=[{"tiltAngle": 3, "panAngle": 5, "rollAngle": 1, "detectionConfidence": 0.95,
                "boundingPoly": {"vertices": [{"x": 100, "y": 100}]}}],
        colors=6,
    )


@pytest.fixture
def slouched_payload():
    """Seated person bent over, head turned - detected with 70 points"""
    return _payload(
        labels=[
            ("Person", 0.95), ("Human", 0.92), ("Sitting", 0.88), ("Head", 0.85),
            ("Shoulder", 0.82), ("Spine", 0.90), ("Bent", 0.90), ("Shirt", 0.75),
            ("Jeans", 0.72),
        ],
        objects=[("Person", 0.90)],
        faces=[{"tiltAngle": 12, "panAngle": -15, "rollAngle": 4, "detectionConfidence": 0.9}],
        colors=6,
    )


@pytest.fixture
def empty_room_payload():
    return _payload(
        labels=[("Chair", 0.85), ("Table", 0.80), ("Room", 0.75)],
        objects=[],
        faces=[],
        colors=4,
    )


@pytest.fixture
def upright_raw(upright_payload):
    return parse_vision_response(upright_payload)


@pytest.fixture
def slouched_raw(slouched_payload):
    return parse_vision_response(slouched_payload)


@pytest.fixture
def make_raw():
    """Build RawAnnotations from (text, confidence) pairs"""

    def _make(
        labels: Sequence[Tuple[str, float]] = (),
        objects: Sequence[Tuple[str, float]] = (),
        faces: Optional[Sequence[dict]] = None,
        colors: Optional[int] = None,
    ) -> RawAnnotations:
        return RawAnnotations(
            labels=[{"description": d, "score": s} for d, s in labels],
            objects=[{"name": n, "score": s} for n, s in objects],
            faces=None if faces is None else [FaceAnnotation(**f) for f in faces],
            dominant_color_count=colors,
        )

    return _make


@pytest.fixture
def make_features():
    """Build ExtractedFeatures directly from keywords"""

    def _make(keywords=(), faces=(), colors: int = 5) -> ExtractedFeatures:
        return ExtractedFeatures(
            keywords=frozenset(keywords),
            faces=tuple(FaceAnnotation(**f) for f in faces),
            dominant_color_count=colors,
        )

    return _make
