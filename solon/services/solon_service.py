"""
Sólon Sync Service - Gemini with Google Search + Google Maps Grounding

This service performs the single outbound call behind a profile submission.

Architecture:
- Pattern: Grounded LLM (one API call, search + maps tools enabled)
- Model: Gemini 2.5 Flash (googleMaps grounding requires the 2.5 series)
- API: Google Gen AI Python SDK (google-genai)
- Temperature: 0.3
- Location bias: attached to the maps tool when the profile has coordinates
- Output: JSON parsed from text (see solon.agents.solon.interpreter)

There is no retry, no backoff and no caching. Network/API failures and
unparsable replies both surface as SolonSyncError with the same generic
message; callers cannot and should not tell them apart.
"""

import logging
from datetime import datetime
from typing import Optional

from google import genai
from google.genai import types

from solon.agents.solon.interpreter import (
    SolonSyncError,
    extract_sources,
    interpret_reply,
)
from solon.agents.solon.prompts import SolonRequest, compose_request
from solon.config import settings
from solon.schemas.profile import UserProfile
from solon.schemas.solon import SolonResult
from solon.utils.logging import preview

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client = None


def _get_gemini_client():
    """
    Lazy initialization of Gemini client.
    Uses the Google Gen AI SDK.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    if not settings.GOOGLE_API_KEY:
        logger.warning(
            "GOOGLE_API_KEY not configured. Sólon cannot sync. "
            "Please set GOOGLE_API_KEY in your .env file."
        )
        return None

    try:
        _gemini_client = genai.Client(api_key=settings.GOOGLE_API_KEY)
        logger.info("Gemini client initialized successfully for Sólon")
        return _gemini_client
    except Exception as e:
        logger.error(f"Failed to initialize Gemini client: {e}")
        return None


def build_generation_config(
    request: SolonRequest,
    profile: UserProfile,
) -> types.GenerateContentConfig:
    """
    Build the generation config for a sync.

    NOTE: The maps tool doesn't support response_mime_type='application/json'
    or response_schema. JSON is requested in the prompt instead.
    """
    tool_config: Optional[types.ToolConfig] = None
    if profile.coordinates is not None:
        tool_config = types.ToolConfig(
            retrieval_config=types.RetrievalConfig(
                lat_lng=types.LatLng(
                    latitude=profile.coordinates.latitude,
                    longitude=profile.coordinates.longitude,
                )
            )
        )

    return types.GenerateContentConfig(
        system_instruction=request.system_instruction,
        temperature=settings.GEMINI_TEMPERATURE,
        tools=[
            types.Tool(google_search=types.GoogleSearch()),
            types.Tool(google_maps=types.GoogleMaps()),
        ],
        tool_config=tool_config,
    )


async def sync_patterns(profile: UserProfile, current_time: datetime) -> SolonResult:
    """
    Run one sync for a submitted profile.

    This function:
    1. Composes the system instruction and user prompt
    2. Calls Gemini once with search + maps grounding
    3. Extracts grounding source URIs
    4. Interprets the reply text into a SolonResult

    Args:
        profile: Submitted profile
        current_time: Submission time (recorded on the request)

    Returns:
        SolonResult. Empty job lists are a valid outcome.

    Raises:
        SolonSyncError: Client unavailable, API failure, or unparsable reply
    """
    logger.info(
        f"sync_patterns called for location='{preview(profile.location)}', "
        f"country={profile.country}, coordinates={'yes' if profile.coordinates else 'no'}"
    )

    client = _get_gemini_client()
    if client is None:
        logger.error("Gemini client not available")
        raise SolonSyncError()

    request = compose_request(profile, current_time)
    config = build_generation_config(request, profile)

    try:
        logger.info("Calling Gemini API with Google Search + Google Maps grounding...")
        response = client.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=request.user_prompt,
            config=config,
        )
    except Exception as e:
        logger.error(f"Error calling Gemini API: {e}", exc_info=True)
        raise SolonSyncError() from e

    sources = extract_sources(response)
    if sources:
        logger.info(f"Found {len(sources)} grounding source URIs")

    result = interpret_reply(response.text, sources)

    logger.info(
        f"Sync complete: {len(result.profile_jobs)} profile jobs, "
        f"{len(result.nearby_jobs)} nearby jobs, "
        f"investment={'yes' if result.investment else 'no'}"
    )
    return result
