# core/config_validator.py

from typing import List
from core.config import settings, DEFAULT_JWT_SECRET
from core.logging_config import logger


def validate_required_config() -> List[str]:
    """
    Settings that must be changed before running outside development.
    Returns list of problems.
    """
    problems = []

    if settings.ENV == "production" and settings.JWT_SECRET_KEY == DEFAULT_JWT_SECRET:
        problems.append("JWT_SECRET_KEY (still the development default)")

    return problems


def validate_optional_config() -> List[str]:
    """
    Optional settings whose absence only disables a feature.
    """
    warnings = []

    if not settings.GEMINI_API_KEY:
        warnings.append("GEMINI_API_KEY (AI notice drafting disabled)")

    return warnings


def validate_config_on_startup():
    """
    Raises RuntimeError if critical config is wrong.
    Logs warnings for optional config.
    """
    missing_required = validate_required_config()
    missing_optional = validate_optional_config()

    if missing_required:
        error_msg = f"Invalid configuration: {', '.join(missing_required)}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)

    for warning in missing_optional:
        logger.warning(f"Optional configuration missing: {warning}")

    logger.info("Configuration validation passed")
