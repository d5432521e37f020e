"""
Service layer for the Sólon portal backend.

Contains the orchestration that:
- Performs the single grounded Gemini call per submission
- Maps interpreted results into portal view models
- Holds per-screen session state

Services act as the glue between routes (HTTP layer) and the agent layer.
"""

from .portal import PortalSession, SubmissionInProgressError
from .solon_service import sync_patterns

__all__ = [
    "PortalSession",
    "SubmissionInProgressError",
    "sync_patterns",
]
