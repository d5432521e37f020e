"""
Sólon - Grounded Job and Investment Roadmap

Request Composer and Response Interpreter for the single Gemini call.
"""

from solon.agents.solon.interpreter import (
    SYNC_FAILED_MESSAGE,
    SolonSyncError,
    extract_sources,
    interpret_reply,
    locate_json_object,
)
from solon.agents.solon.prompts import (
    SolonRequest,
    build_solon_system_prompt,
    build_solon_user_prompt,
    compose_request,
)

__all__ = [
    "SYNC_FAILED_MESSAGE",
    "SolonRequest",
    "SolonSyncError",
    "build_solon_system_prompt",
    "build_solon_user_prompt",
    "compose_request",
    "extract_sources",
    "interpret_reply",
    "locate_json_object",
]
