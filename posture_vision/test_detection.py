"""
Tests for multi-layer person detection
"""
from posture_vision.detection import detect_person
from posture_vision.extraction import parse_vision_response


def test_upright_photo_is_detected(upright_raw):
    verdict = detect_person(upright_raw)

    # 40 primary + 15 object + 8 body parts + 4 clothing + 5 face
    assert verdict.detected is True
    assert verdict.confidence_percent == 72.0
    assert verdict.detection_methods == [
        "primary_labels", "object_localization", "body_parts", "clothing", "face_detection",
    ]
    assert verdict.body_parts_found == ["head", "shoulder", "spine", "hip"]
    assert verdict.clothing_found == ["shirt", "jeans"]
    assert verdict.face_count == 1


def test_empty_annotations_are_not_detected(make_raw):
    verdict = detect_person(make_raw())

    # image quality penalty only, no clamping
    assert verdict.detected is False
    assert verdict.confidence_percent == -10.0
    assert verdict.detection_methods == []


def test_empty_room_is_not_detected(empty_room_payload):
    verdict = detect_person(parse_vision_response(empty_room_payload))

    assert verdict.detected is False
    assert verdict.confidence_percent == -10.0


def test_primary_labels_capped_at_40(make_raw):
    raw = make_raw(
        labels=[("person", 0.9), ("woman", 0.9), ("selfie", 0.9), ("portrait", 0.9), ("smile", 0.9)],
        colors=5,
    )
    verdict = detect_person(raw)

    assert verdict.confidence_percent == 40.0


def test_primary_floor_is_strict(make_raw):
    verdict = detect_person(make_raw(labels=[("person", 0.7)], colors=5))

    assert verdict.confidence_percent == 0.0


def test_person_objects_match_case_insensitively(make_raw):
    raw = make_raw(objects=[("Person", 0.9), ("PERSON", 0.8), ("person", 0.75)], colors=5)
    verdict = detect_person(raw)

    assert verdict.confidence_percent == 30.0
    assert verdict.detection_methods == ["object_localization"]


def test_non_person_objects_score_nothing(make_raw):
    verdict = detect_person(make_raw(objects=[("Chair", 0.95), ("Person", 0.7)], colors=5))

    assert verdict.confidence_percent == 0.0


def test_body_parts_need_three_distinct_terms(make_raw):
    two = detect_person(make_raw(labels=[("arm", 0.9), ("hand", 0.9)], colors=5))
    three = detect_person(make_raw(labels=[("arm", 0.9), ("hand", 0.9), ("elbow", 0.9)], colors=5))

    assert two.confidence_percent == 0.0
    assert "body_parts" not in two.detection_methods
    assert three.confidence_percent == 6.0
    assert three.body_parts_found == ["arm", "elbow", "hand"]


def test_clothing_needs_two_distinct_terms(make_raw):
    one = detect_person(make_raw(labels=[("jacket", 0.9)], colors=5))
    two = detect_person(make_raw(labels=[("jacket", 0.9), ("jeans", 0.9)], colors=5))

    assert one.confidence_percent == 0.0
    assert two.confidence_percent == 4.0


def test_faces_score_five_each_up_to_ten(make_raw):
    face = {"tilt_angle": 0, "pan_angle": 0}

    assert detect_person(make_raw(faces=[face], colors=5)).confidence_percent == 5.0
    assert detect_person(make_raw(faces=[face] * 3, colors=5)).confidence_percent == 10.0


def test_low_color_count_costs_ten_points(make_raw):
    labels = [("person", 0.9), ("human", 0.9)]

    assert detect_person(make_raw(labels=labels, colors=5)).confidence_percent == 20.0
    assert detect_person(make_raw(labels=labels, colors=2)).confidence_percent == 10.0


def test_confidence_can_exceed_100(make_raw):
    raw = make_raw(
        labels=[
            ("person", 0.95), ("human", 0.95), ("woman", 0.9), ("selfie", 0.9),
            ("head", 0.9), ("neck", 0.9), ("shoulder", 0.9), ("arm", 0.9), ("hand", 0.9),
            ("chest", 0.9), ("leg", 0.9), ("knee", 0.9), ("foot", 0.9), ("eye", 0.9),
            ("shirt", 0.9), ("jeans", 0.9), ("jacket", 0.9), ("sneaker", 0.9), ("dress", 0.9),
        ],
        objects=[("person", 0.9), ("person", 0.85)],
        faces=[{"tilt_angle": 0}, {"tilt_angle": 0}],
        colors=8,
    )
    verdict = detect_person(raw)

    assert verdict.detected is True
    assert verdict.confidence_percent == 110.0


def test_threshold_is_inclusive(slouched_raw, make_raw):
    # 40 primary + 15 object + 5 face = 60
    raw = make_raw(
        labels=[("person", 0.9), ("human", 0.9), ("woman", 0.9), ("portrait", 0.9)],
        objects=[("person", 0.9)],
        faces=[{"tilt_angle": 0}],
        colors=5,
    )

    assert detect_person(raw).confidence_percent == 60.0
    assert detect_person(raw).detected is True
    assert detect_person(slouched_raw).confidence_percent == 70.0
