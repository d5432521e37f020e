"""
Logging utilities for the Sólon portal backend.

Provides standardized logger configuration following privacy rules.

PRIVACY RULES:
- NEVER log the Gemini API key
- NEVER log full profile free text (experience, skills) or coordinates
- NEVER log full model replies; a short preview is enough to debug parsing

Acceptable logging:
- High-level events (e.g., "Sync requested", "Gemini call completed")
- Counts (e.g., "3 profile jobs, 2 nearby jobs, 5 sources")
- Truncated location strings and error messages
"""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from solon.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def preview(text: Optional[str], limit: int = 50) -> str:
    """Truncate free text for log lines."""
    if not text:
        return ""
    return text if len(text) <= limit else f"{text[:limit]}..."
