from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for payloads exchanged with the dashboard (camelCase on the wire)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ============================================================================
# INPUT - vision annotations
# ============================================================================

class LabelAnnotation(FrozenCamelModel):
    description: str = ""
    confidence: float = Field(0.0, validation_alias=AliasChoices("confidence", "score"))


class ObjectAnnotation(FrozenCamelModel):
    name: str = ""
    confidence: float = Field(0.0, validation_alias=AliasChoices("confidence", "score"))


class FaceAnnotation(FrozenCamelModel):
    tilt_angle: float = 0.0
    pan_angle: float = 0.0
    roll_angle: float = 0.0
    detection_confidence: float = 0.0


class RawAnnotations(FrozenCamelModel):
    labels: Tuple[LabelAnnotation, ...] = ()
    objects: Tuple[ObjectAnnotation, ...] = ()
    faces: Optional[Tuple[FaceAnnotation, ...]] = None
    dominant_color_count: Optional[int] = None


class ExtractedFeatures(FrozenCamelModel):
    keywords: FrozenSet[str] = frozenset()
    faces: Tuple[FaceAnnotation, ...] = ()
    dominant_color_count: int = 0


# ============================================================================
# OUTPUT - verdicts
# ============================================================================

class PostureStatus(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"


class FeedbackItem(FrozenCamelModel):
    severity: Severity
    message: str


class DetectionVerdict(CamelModel):
    detected: bool
    confidence_percent: float
    detection_methods: List[str] = Field(default_factory=list)
    body_parts_found: List[str] = Field(default_factory=list)
    clothing_found: List[str] = Field(default_factory=list)
    face_count: int = 0


class RegionScore(CamelModel):
    score: int
    issues: List[str] = Field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW
    recommendations: List[str] = Field(default_factory=list)


class DetailedAnalysis(CamelModel):
    head_neck: RegionScore
    shoulders: RegionScore
    spine: RegionScore
    hips: RegionScore
    overall: RegionScore


class AnalysisMetadata(CamelModel):
    dominant_color_count: int
    keyword_count: int
    detection_confidence: float
    detection_methods: List[str] = Field(default_factory=list)


class PostureVerdict(CamelModel):
    score: int
    status: PostureStatus
    feedback: List[str]
    recommendations: List[str]
    confidence: float
    person_detected: bool
    face_detected: bool
    detailed_analysis: Optional[DetailedAnalysis] = None
    feedback_items: List[FeedbackItem] = Field(default_factory=list)
    recommendation_items: List[FeedbackItem] = Field(default_factory=list)
    detection: Optional[DetectionVerdict] = None
    analysis_metadata: Optional[AnalysisMetadata] = None


# ============================================================================
# HTTP payloads
# ============================================================================

class AnalyzeImageRequest(BaseModel):
    image: Optional[str] = None


class AnalysisResponse(CamelModel):
    success: bool = True
    analysis: PostureVerdict


class ErrorType(str, Enum):
    PERSON_NOT_DETECTED = "PERSON_NOT_DETECTED"
    IMAGE_QUALITY = "IMAGE_QUALITY"
    API_ERROR = "API_ERROR"
    PROCESSING_ERROR = "PROCESSING_ERROR"
    RATE_LIMIT = "RATE_LIMIT"


class PostureAnalysisError(CamelModel):
    success: bool = False
    error_type: ErrorType
    error_code: str
    message: str
    suggestions: List[str] = Field(default_factory=list)
    retryable: bool = False
