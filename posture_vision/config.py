# Configuration Module - module-level settings and posture thresholds
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Cloud Vision Configuration
CLOUD_VISION_API_KEY = os.getenv("CLOUD_VISION_API_KEY")  # Required: Set in .env file
CLOUD_VISION_BASE_URL = os.getenv("CLOUD_VISION_BASE_URL", "https://vision.googleapis.com/v1")
VISION_TIMEOUT_SECONDS = float(os.getenv("VISION_TIMEOUT_SECONDS", "10"))
VISION_MAX_LABELS = 20
VISION_MAX_OBJECTS = 10
VISION_MAX_FACES = 5

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Annotation confidence floors (strictly greater than)
KEYWORD_CONFIDENCE_FLOOR = 0.6
PRIMARY_PERSON_CONFIDENCE_FLOOR = 0.7

# Person Detection - points out of a 100 point budget
DETECTION_BUDGET = 100
DETECTION_THRESHOLD = 60
DETECTION_LAYERS = {
    "primary_labels": {"points_each": 10, "cap": 40},
    "object_localization": {"points_each": 15, "cap": 30},
    "body_parts": {"points_each": 2, "cap": 20, "min_matches": 3},
    "clothing": {"points_each": 2, "cap": 10, "min_matches": 2},
    "face_detection": {"points_each": 5, "cap": 10},
}
IMAGE_QUALITY_MIN_COLORS = 5      # detector penalty below this
IMAGE_QUALITY_PENALTY = 10
OVERALL_MIN_COLORS = 3            # overall region penalty below this

# Face geometry limits (degrees)
MAX_HEAD_TILT_DEGREES = 5
MAX_HEAD_PAN_DEGREES = 10

# Region weights - order: head_neck, shoulders, spine, hips, overall
REGION_ORDER = ("head_neck", "shoulders", "spine", "hips", "overall")
REGION_WEIGHTS = {
    "head_neck": 0.15,
    "shoulders": 0.2,
    "spine": 0.3,
    "hips": 0.2,
    "overall": 0.15,
}

# Status Bands (lower bound inclusive)
STATUS_BANDS = {
    "good": 85,
    "fair": 60,
}

# Region Risk Bands (lower bound inclusive)
RISK_BANDS = {
    "low": 85,
    "moderate": 60,
    "high": 30,
}

# Fallback verdicts
NO_PERSON_SCORE = 0
DEGRADED_SCORE = 25
DEGRADED_CONFIDENCE = 0.1
