# Keyword tables and penalty rules for person detection and region scoring.
# Every term is matched as a lower-case substring of a keyword.
from typing import NamedTuple, Tuple


class PenaltyRule(NamedTuple):
    terms: Tuple[str, ...]
    penalty: int
    issue: str
    requires: Tuple[str, ...] = ()  # second group that must also match


class RegionProfile(NamedTuple):
    prerequisite: Tuple[str, ...]
    rules: Tuple[PenaltyRule, ...]
    missing: PenaltyRule
    trailing: Tuple[PenaltyRule, ...] = ()  # applied whether or not the prerequisite matched


# ============================================================================
# PERSON DETECTION DICTIONARIES
# ============================================================================

PRIMARY_PERSON_TERMS = (
    "person", "human", "people", "man", "woman", "boy", "girl", "child",
    "adult", "selfie", "portrait", "face", "head", "body", "skin",
    "standing", "sitting", "gesture", "smile", "individual",
)

BODY_PART_TERMS = (
    "head", "face", "forehead", "eye", "ear", "nose", "mouth", "lip",
    "chin", "jaw", "cheek", "neck", "shoulder", "arm", "elbow", "wrist",
    "hand", "finger", "thumb", "chest", "torso", "abdomen", "belly", "waist",
    "back", "spine", "hip", "pelvis", "buttock", "leg", "thigh", "knee",
    "calf", "shin", "ankle", "foot", "feet", "toe", "skin", "muscle",
)

CLOTHING_TERMS = (
    "shirt", "t-shirt", "blouse", "top", "jacket", "coat", "sweater",
    "hoodie", "sweatshirt", "vest", "dress", "skirt", "pants", "trousers",
    "jeans", "shorts", "leggings", "sleeve", "collar", "suit", "uniform",
    "clothing", "outerwear", "sportswear", "activewear", "shoe", "sneaker",
)

PERSON_OBJECT_NAME = "person"


# ============================================================================
# HEAD / NECK
# ============================================================================

HEAD_FORWARD_ISSUE = "🚨 Forward head posture or head tilt detected"
HEAD_TILT_ISSUE = "⚠️ Head tilted up or down beyond the neutral range"
HEAD_PAN_ISSUE = "⚠️ Head turned to one side"
NO_FACE_ISSUE = "❌ Face not clearly visible - head and neck position could not be assessed"
NECK_STRAIN_ISSUE = "🚨 Signs of neck strain or tension"

HEAD_FORWARD_RULE = PenaltyRule(("forward", "tilted"), 40, HEAD_FORWARD_ISSUE)
HEAD_TILT_PENALTY = 25
HEAD_PAN_PENALTY = 20
NO_FACE_PENALTY = 30
NECK_STRAIN_RULE = PenaltyRule(
    ("neck", "cervical"), 35, NECK_STRAIN_ISSUE, requires=("strain", "tension")
)


# ============================================================================
# SHOULDERS
# ============================================================================

SHOULDER_PROFILE = RegionProfile(
    prerequisite=("shoulder",),
    rules=(
        PenaltyRule(("rounded", "hunched"), 45, "🚨 Rounded or hunched shoulders detected"),
        PenaltyRule(("asymmetric", "uneven"), 30, "⚠️ Uneven shoulder height detected"),
        PenaltyRule(("elevated", "raised"), 25, "⚠️ Shoulders elevated - possible tension"),
    ),
    missing=PenaltyRule((), 20, "⚠️ Shoulder position unclear"),
)


# ============================================================================
# SPINE
# ============================================================================

SPINE_BENDING_ISSUE = "💀 Severe forward bending of the spine detected"
SPINE_BENT_BODY_ISSUE = "💀 Body bent forward - heavy load on the lower back"

SPINE_PROFILE = RegionProfile(
    prerequisite=("spine", "back", "torso", "body"),
    rules=(
        PenaltyRule(
            ("bent", "bending", "stooped", "stooping", "forward", "flexed",
             "curved", "hunched", "crouched", "leaning"),
            80, SPINE_BENDING_ISSUE,
        ),
        PenaltyRule(("slouched", "slumped"), 60, "🚨 Slouched or slumped posture detected"),
        PenaltyRule(("curved", "kyphosis"), 70, "🚨 Excessive spinal curvature detected"),
        PenaltyRule(("twisted", "rotated"), 50, "⚠️ Twisted or rotated spine detected"),
        PenaltyRule(("forward",), 40, "⚠️ Forward head position loading the upper spine",
                    requires=("head",)),
    ),
    missing=PenaltyRule((), 30, "⚠️ Spine alignment unclear - back not clearly visible"),
    # Overlaps the bending rule above; both penalties stack.
    trailing=(
        PenaltyRule(("bent", "leaning", "forward", "stooped"), 70, SPINE_BENT_BODY_ISSUE),
    ),
)

SPINE_BENDING_ISSUES = (SPINE_BENDING_ISSUE, SPINE_BENT_BODY_ISSUE)


# ============================================================================
# HIPS
# ============================================================================

HIP_REGION_TERMS = (
    "hip", "pelvis", "pelvic", "waist", "glute", "buttock", "thigh", "groin",
    "lumbar", "sacrum", "tailbone", "lower back", "lower body", "leg", "knee",
    "hamstring", "quadricep", "stance", "squat", "lunge",
)

HIP_PROFILE = RegionProfile(
    prerequisite=HIP_REGION_TERMS,
    rules=(
        PenaltyRule(("tilted", "rotated", "twisted", "asymmetric", "uneven"), 45,
                    "🚨 Hip misalignment detected"),
        PenaltyRule(("shifted", "offset", "displaced", "misaligned"), 40,
                    "⚠️ Hips shifted off center"),
        PenaltyRule(("anterior", "posterior", "forward", "backward",
                     "anterior tilt", "posterior tilt", "pelvic tilt"), 50,
                    "🚨 Pelvic tilt detected"),
        PenaltyRule(("unstable", "wobbly", "weak", "collapsed"), 35,
                    "⚠️ Hip instability detected"),
        PenaltyRule(("uneven", "different", "asymmetric", "one side"), 30,
                    "⚠️ Possible leg length difference"),
        PenaltyRule(("stiff", "rigid", "tight", "restricted"), 25,
                    "⚠️ Restricted hip mobility"),
    ),
    missing=PenaltyRule((), 35, "⚠️ Hip position unclear"),
    trailing=(
        PenaltyRule(("knee", "ankle", "foot"), 30,
                    "⚠️ Bent or collapsed knees, ankles or feet affecting hip alignment",
                    requires=("bent", "flexed", "collapsed")),
    ),
)


# ============================================================================
# OVERALL
# ============================================================================

OVERALL_RULES = (
    PenaltyRule(("poor", "bad", "bent", "bending", "stooped", "stooping", "slouched",
                 "slouching", "slumped", "hunched", "crouched", "leaning"), 75,
                "💀 Poor overall posture with bending detected"),
    PenaltyRule(("strain", "stress", "tension"), 40, "🚨 Signs of physical strain or tension"),
    PenaltyRule(("forward",), 60, "🚨 Forward-leaning body position"),
    PenaltyRule(("misaligned", "asymmetric", "uneven", "crooked", "tilted"), 50,
                "⚠️ General body misalignment detected"),
)

LOW_DETAIL_ISSUE = "⚠️ Low image detail - lighting or framing may limit accuracy"
LOW_DETAIL_PENALTY = 20
