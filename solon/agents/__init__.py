"""
AI Components for the Sólon portal backend.

Sólon (Web + Maps Grounded LLM)
- Uses Gemini with Google Search and Google Maps grounding
- NOT an ADK agent - one direct call through the Google Gen AI SDK
- Prompt templates: solon/agents/solon/prompts.py
- Reply interpretation: solon/agents/solon/interpreter.py
- Network call: solon/services/solon_service.py
"""

from solon.agents.solon import (
    SolonRequest,
    SolonSyncError,
    compose_request,
    interpret_reply,
)

__all__ = [
    "SolonRequest",
    "SolonSyncError",
    "compose_request",
    "interpret_reply",
]
