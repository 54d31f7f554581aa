# Main FastAPI Application - Posture Vision Analysis Server
import base64
import binascii
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from posture_vision import config, engine, logger, vision_client
from posture_vision.models import (
    AnalysisResponse,
    AnalyzeImageRequest,
    ErrorType,
    PostureAnalysisError,
)
from posture_vision.vision_client import VisionAPIError

# Initialize FastAPI
app = FastAPI(
    title="Posture Vision Analysis API",
    description="Scores posture from Cloud Vision annotations of a single photo",
    version="1.0.0"
)

ERROR_RESPONSES = {
    400: {"model": PostureAnalysisError},
    422: {"model": PostureAnalysisError},
    429: {"model": PostureAnalysisError},
    500: {"model": PostureAnalysisError},
    502: {"model": PostureAnalysisError},
    504: {"model": PostureAnalysisError},
}


def _error_response(
    http_status: int,
    error_type: ErrorType,
    error_code: str,
    message: str,
    suggestions: Optional[List[str]] = None,
    retryable: bool = False,
) -> JSONResponse:
    error = PostureAnalysisError(
        error_type=error_type,
        error_code=error_code,
        message=message,
        suggestions=suggestions or [],
        retryable=retryable,
    )
    return JSONResponse(status_code=http_status, content=error.model_dump(by_alias=True, mode="json"))


def _strip_data_url(image: str) -> str:
    """Drop a data:image/...;base64, prefix if the client sent one"""
    if image.startswith("data:") and "," in image:
        return image.split(",", 1)[1]
    return image


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies get the PostureAnalysisError shape"""
    logger.log_warning("Invalid Request", {
        "endpoint": request.url.path,
        "errors": len(exc.errors()),
    })
    return _error_response(
        400, ErrorType.IMAGE_QUALITY, "INVALID_REQUEST", "Request body is malformed",
        suggestions=["Send a JSON object such as {\"image\": \"<base64>\"}"],
    )


# ============================================================================
# STARTUP
# ============================================================================

@app.on_event("startup")
async def startup_event():
    logger.log_lifecycle("STARTUP", "Posture Vision Analysis Server")
    logger.log_info("Engine Configuration", {
        "detection_threshold": config.DETECTION_THRESHOLD,
        "region_weights": ", ".join(f"{r}={w}" for r, w in config.REGION_WEIGHTS.items()),
    })

    if config.CLOUD_VISION_API_KEY:
        logger.log_success("Server Ready", {
            "vision_api": config.CLOUD_VISION_BASE_URL,
            "timeout_seconds": config.VISION_TIMEOUT_SECONDS,
            "log_level": config.LOG_LEVEL,
        })
    else:
        logger.log_warning("Vision API Key Missing", {
            "effect": "POST /posture-analysis will return MISSING_API_KEY",
            "fix": "Set CLOUD_VISION_API_KEY in .env",
        })


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy" if config.CLOUD_VISION_API_KEY else "degraded",
        "vision_api_key": "configured" if config.CLOUD_VISION_API_KEY else "missing",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/config-status")
async def config_status():
    """Report vision configuration without exposing the key"""
    api_key = config.CLOUD_VISION_API_KEY or ""
    return {
        "cloudVisionApiKey": bool(api_key),
        "cloudVisionApiKeyLength": len(api_key),
        "cloudVisionBaseUrl": config.CLOUD_VISION_BASE_URL,
    }


# ============================================================================
# POSTURE ANALYSIS
# ============================================================================

@app.post(
    "/posture-analysis",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def analyze_image(request: AnalyzeImageRequest):
    """
    Analyze posture in a base64 photo

    Fetches annotations from Cloud Vision, then runs the scoring engine.
    Upstream failures come back as PostureAnalysisError, never as a verdict.
    """
    if not request.image:
        logger.log_warning("Missing Image", {"endpoint": "/posture-analysis"})
        return _error_response(
            400, ErrorType.IMAGE_QUALITY, "MISSING_IMAGE", "No image provided",
            suggestions=["Capture a photo before requesting analysis"],
        )

    image_b64 = _strip_data_url(request.image)
    try:
        base64.b64decode(image_b64, validate=True)
    except (binascii.Error, ValueError):
        logger.log_warning("Invalid Image", {"length": len(image_b64)})
        return _error_response(
            400, ErrorType.IMAGE_QUALITY, "INVALID_IMAGE", "Image is not valid base64 data",
            suggestions=["Send the image as base64 encoded JPEG or PNG"],
        )

    logger.log_api("Request Received", {"endpoint": "/posture-analysis", "image_chars": len(image_b64)})

    try:
        payload = vision_client.annotate_image(image_b64)
    except VisionAPIError as e:
        logger.log_error("Vision Request Failed", e, {"error_code": e.error_code})
        return _error_response(
            e.http_status, e.error_type, e.error_code, e.message,
            suggestions=e.suggestions, retryable=e.retryable,
        )

    verdict = engine.analyze_vision_response(payload)
    logger.log_success("Analysis Complete", {
        "score": verdict.score,
        "status": verdict.status.value,
        "person_detected": verdict.person_detected,
    })

    return AnalysisResponse(analysis=verdict)


@app.post(
    "/posture-analysis/annotations",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
)
def analyze_annotations(payload: Dict[str, Any] = Body(...)):
    """Score an images:annotate response body that was fetched elsewhere"""
    logger.log_api("Request Received", {"endpoint": "/posture-analysis/annotations"})
    verdict = engine.analyze_vision_response(payload)
    return AnalysisResponse(analysis=verdict)


# ============================================================================
# ROOT
# ============================================================================

@app.get("/")
async def root():
    """API information"""
    return {
        "service": "Posture Vision Analysis API",
        "version": "1.0.0",
        "endpoints": {
            "analysis": ["/posture-analysis", "/posture-analysis/annotations"],
            "health": ["/health", "/config-status"]
        },
        "documentation": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
