# Structured Logging Module - Procedural Approach
from datetime import datetime
from typing import Any, Dict, Optional

from posture_vision import config


# ANSI Color Codes for Terminal
class Colors:
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    PURPLE = '\033[95m'
    CYAN = '\033[96m'
    WHITE = '\033[97m'
    GREY = '\033[90m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


# Step Prefixes with Emojis
STEP_PREFIXES = {
    "VISION": "👁️",
    "DETECT": "🧍",
    "REGION": "📐",
    "ENGINE": "⚙️",
    "FEEDBACK": "💬",
    "API": "🌐",
    "SYSTEM": "🔧",
    "DEBUG": "🔍",
    "ERROR": "❌",
    "SUCCESS": "✅",
    "WARNING": "⚠️"
}

# Next Step Suggestions
NEXT_STEPS = {
    "VISION:ANNOTATIONS": "Annotations received, handing off to the scoring engine",
    "DETECT:PERSON": "Person found, scoring body regions",
    "DETECT:NO": "Returning no-person verdict, ask user to step into frame",
    "ENGINE:AGGREGATE": "Aggregate ready, composing feedback",
    "FEEDBACK:COMPOSED": "Verdict complete, returning response",
    "API:REQUEST": "Processing request",
}


def get_timestamp() -> str:
    """Get formatted timestamp"""
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


def log_step(step: str, action: str, data: Optional[Dict[str, Any]] = None, color: str = Colors.CYAN):
    """
    Log a step with structured format

    Args:
        step: Step category (VISION, DETECT, REGION, ENGINE, API, etc.)
        action: Description of the action
        data: Optional dictionary of data to display
        color: ANSI color code
    """
    prefix = STEP_PREFIXES.get(step, "🔹")
    timestamp = get_timestamp()

    print(f"{color}{Colors.BOLD}[{timestamp}] {prefix} [{step}]{Colors.RESET} {action}")

    if data:
        for key, value in data.items():
            # Truncate long values
            if isinstance(value, str) and len(value) > 100:
                value = value[:97] + "..."
            print(f"   {Colors.WHITE}├─ {key}: {value}{Colors.RESET}")

    # Suggest next step
    next_step_key = f"{step}:{action.split()[0].upper()}" if action else step
    if next_step_key in NEXT_STEPS:
        print(f"   {Colors.YELLOW}└─ >>> Next: {NEXT_STEPS[next_step_key]}{Colors.RESET}")
    print()  # Blank line for readability


def log_vision(action: str, data: Optional[Dict[str, Any]] = None):
    """Log vision provider events"""
    log_step("VISION", action, data, Colors.BLUE)


def log_detect(action: str, data: Optional[Dict[str, Any]] = None):
    """Log person detection events"""
    log_step("DETECT", action, data, Colors.PURPLE)


def log_region(action: str, data: Optional[Dict[str, Any]] = None):
    """Log region analyzer events"""
    log_step("REGION", action, data, Colors.CYAN)


def log_engine(action: str, data: Optional[Dict[str, Any]] = None):
    """Log scoring engine events"""
    log_step("ENGINE", action, data, Colors.CYAN)


def log_feedback(action: str, data: Optional[Dict[str, Any]] = None):
    """Log feedback composition events"""
    log_step("FEEDBACK", action, data, Colors.GREEN)


def log_api(action: str, data: Optional[Dict[str, Any]] = None):
    """Log API events"""
    log_step("API", action, data, Colors.CYAN)


def log_info(action: str, data: Optional[Dict[str, Any]] = None):
    """Log general system events"""
    log_step("SYSTEM", action, data, Colors.WHITE)


def log_debug(action: str, data: Optional[Dict[str, Any]] = None):
    """Log verbose details, only when LOG_LEVEL=DEBUG"""
    if config.LOG_LEVEL != "DEBUG":
        return
    log_step("DEBUG", action, data, Colors.GREY)


def log_error(action: str, error: Exception, data: Optional[Dict[str, Any]] = None):
    """Log errors with exception type"""
    error_data = dict(data or {})
    error_data["Error"] = str(error)
    error_data["Type"] = type(error).__name__
    log_step("ERROR", action, error_data, Colors.RED)


def log_success(action: str, data: Optional[Dict[str, Any]] = None):
    """Log success events"""
    log_step("SUCCESS", action, data, Colors.GREEN)


def log_warning(action: str, data: Optional[Dict[str, Any]] = None):
    """Log warnings"""
    log_step("WARNING", action, data, Colors.YELLOW)


def log_lifecycle(phase: str, details: str = ""):
    """
    Log major lifecycle events with clear visual separation

    Args:
        phase: Phase name (e.g., "STARTUP", "SHUTDOWN")
        details: Optional details
    """
    separator = "=" * 80
    print(f"\n{Colors.BOLD}{Colors.CYAN}{separator}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.CYAN}>>> {phase} {details}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.CYAN}{separator}{Colors.RESET}\n")
