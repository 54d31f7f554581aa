# Cloud Vision client - fetches annotations for one base64 image
from typing import Any, Dict, List, Optional

import requests

from posture_vision import config, logger
from posture_vision.models import ErrorType


class VisionAPIError(Exception):
    """Upstream failure while fetching annotations. Never reaches the engine."""

    def __init__(
        self,
        message: str,
        error_code: str,
        http_status: int = 502,
        error_type: ErrorType = ErrorType.API_ERROR,
        retryable: bool = False,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.http_status = http_status
        self.error_type = error_type
        self.retryable = retryable
        self.suggestions = suggestions or []


def build_annotate_request(image_b64: str) -> Dict[str, Any]:
    return {
        "requests": [
            {
                "image": {"content": image_b64},
                "features": [
                    {"type": "LABEL_DETECTION", "maxResults": config.VISION_MAX_LABELS},
                    {"type": "FACE_DETECTION", "maxResults": config.VISION_MAX_FACES},
                    {"type": "OBJECT_LOCALIZATION", "maxResults": config.VISION_MAX_OBJECTS},
                    {"type": "SAFE_SEARCH_DETECTION"},
                    {"type": "IMAGE_PROPERTIES"},
                    {"type": "TEXT_DETECTION"},
                ],
            }
        ]
    }


def annotate_image(image_b64: str, api_key: Optional[str] = None) -> Dict[str, Any]:
    """
    Call images:annotate for a single image

    Args:
        image_b64: Base64 image content (no data URL prefix)
        api_key: Overrides CLOUD_VISION_API_KEY

    Returns:
        Provider response body ({"responses": [...]})

    Raises:
        VisionAPIError: missing key, network failure, non-2xx status,
            per-image error or unreadable body
    """
    api_key = api_key or config.CLOUD_VISION_API_KEY
    if not api_key:
        raise VisionAPIError(
            "Cloud Vision API key not configured",
            "MISSING_API_KEY",
            http_status=500,
            suggestions=["Set CLOUD_VISION_API_KEY in the server environment"],
        )

    url = f"{config.CLOUD_VISION_BASE_URL}/images:annotate"
    logger.log_vision("Requesting Annotations", {"url": url})

    try:
        response = requests.post(
            url,
            params={"key": api_key},
            json=build_annotate_request(image_b64),
            timeout=config.VISION_TIMEOUT_SECONDS,
        )
    except requests.exceptions.Timeout as e:
        raise VisionAPIError(
            "Vision API timed out",
            "VISION_API_TIMEOUT",
            http_status=504,
            retryable=True,
            suggestions=["Try again in a moment"],
        ) from e
    except requests.exceptions.RequestException as e:
        raise VisionAPIError(
            f"Vision API unreachable: {e}",
            "VISION_API_UNREACHABLE",
            retryable=True,
            suggestions=["Check the network connection and try again"],
        ) from e

    if response.status_code == 429:
        raise VisionAPIError(
            "Vision API rate limit reached",
            "VISION_API_429",
            http_status=429,
            error_type=ErrorType.RATE_LIMIT,
            retryable=True,
            suggestions=["Wait a minute before analyzing another photo"],
        )

    if not response.ok:
        raise VisionAPIError(
            f"Vision API error: {response.status_code} - {response.text[:200]}",
            f"VISION_API_{response.status_code}",
            retryable=response.status_code >= 500,
            suggestions=["Try again later"],
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise VisionAPIError(
            "Vision API returned a non-JSON body",
            "VISION_API_INVALID_RESPONSE",
            retryable=True,
        ) from e

    if not isinstance(payload, dict):
        raise VisionAPIError(
            "Vision API returned an unexpected body",
            "VISION_API_INVALID_RESPONSE",
            retryable=True,
        )

    responses = payload.get("responses") or [{}]
    first = (responses[0] if isinstance(responses, list) else responses) or {}
    if not isinstance(first, dict):
        raise VisionAPIError(
            "Vision API returned a malformed response entry",
            "VISION_API_INVALID_RESPONSE",
            retryable=True,
        )

    if first.get("error"):
        if not isinstance(first["error"], dict):
            raise VisionAPIError(
                "Vision API returned a malformed error entry",
                "VISION_API_INVALID_RESPONSE",
                retryable=True,
            )
        raise VisionAPIError(
            f"Vision API could not read the image: {first['error'].get('message', 'unknown error')}",
            "VISION_IMAGE_ERROR",
            http_status=422,
            error_type=ErrorType.IMAGE_QUALITY,
            suggestions=["Upload a JPEG or PNG photo", "Retake the photo with better lighting"],
        )

    logger.log_vision("Annotations Received", {
        "labels": len(first.get("labelAnnotations") or []),
        "objects": len(first.get("localizedObjectAnnotations") or []),
        "faces": len(first.get("faceAnnotations") or []),
    })

    return payload
