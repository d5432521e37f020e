"""
Sólon Response Interpreter

Turns Gemini's free-text reply into a SolonResult.

The maps grounding tool does not support response_mime_type='application/json'
or response_schema, so the JSON object is asked for in the prompt and located
in the reply text. The reply is untrusted:

- No JSON object, or an object that does not parse → SolonSyncError. Nothing
  partial is returned.
- Missing or wrong-typed fields → None / empty list. No further validation;
  the 4 sectors × 4 tips shape is accepted as returned.
"""

import json
import logging
import re
from typing import Any, Dict, Iterator, List, Optional

from solon.agents.solon.prompts import INVESTMENT_SECTOR_COUNT
from solon.schemas.solon import (
    AdviceTip,
    InvestmentSector,
    InvestmentStrategy,
    JobCoordinates,
    JobOpportunity,
    SolonResult,
)

logger = logging.getLogger(__name__)

SYNC_FAILED_MESSAGE = "La sincronización de patrones falló. Intenta de nuevo."

# First '{' through last '}' across lines
_OUTER_BRACES = re.compile(r'\{[\s\S]*\}')
_TRAILING_COMMA = re.compile(r',(\s*[}\]])')

# Keys that identify the top-level reply object
_RESULT_KEYS = ("profileJobs", "nearbyJobs", "investment")


class SolonSyncError(Exception):
    """A sync could not produce a result. The message is safe to show users."""

    def __init__(self, message: str = SYNC_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


# =============================================================================
# JSON LOCATION
# =============================================================================

def _decode_object(candidate: str) -> Optional[Dict[str, Any]]:
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _balanced_objects(text: str) -> Iterator[Dict[str, Any]]:
    """Yield each top-level JSON object that decodes cleanly from a '{' in text."""
    decoder = json.JSONDecoder()
    start = text.find('{')
    while start != -1:
        try:
            parsed, end = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            yield parsed
            # Skip past the object so its nested objects are not yielded
            start = text.find('{', end)
        else:
            start = text.find('{', start + 1)


def locate_json_object(text: str) -> Optional[Dict[str, Any]]:
    """
    Locate the reply object inside free text.

    Tries, in order:
    1. The greedy outer-brace span, as-is.
    2. The same span with trailing commas removed (common LLM mistake).
    3. The balanced object carrying a reply key, when there is exactly one.
       This recovers replies with stray braces in trailing prose. A reply
       split across several objects is rejected rather than half-used.

    Returns:
        The parsed object, or None when nothing usable was found.
    """
    if not text:
        return None

    match = _OUTER_BRACES.search(text)
    if not match:
        return None

    span = match.group(0)
    parsed = _decode_object(span)
    if parsed is not None:
        return parsed

    parsed = _decode_object(_TRAILING_COMMA.sub(r'\1', span))
    if parsed is not None:
        logger.warning("Reply JSON contained trailing commas; parsed after cleanup")
        return parsed

    candidates = [
        candidate for candidate in _balanced_objects(text)
        if any(key in candidate for key in _RESULT_KEYS)
    ]
    if len(candidates) == 1:
        logger.warning("Greedy brace span was not valid JSON; used balanced object")
        return candidates[0]
    if candidates:
        logger.error(f"Reply contained {len(candidates)} separate result objects; rejected")

    return None


# =============================================================================
# FIELD MAPPING
# =============================================================================
# Each helper returns None / [] for anything that is not the expected type.

def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Phone numbers and capitals sometimes arrive as bare numbers
        return str(value)
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    items = [_as_str(item) for item in value]
    return [item for item in items if item is not None]


def _as_dicts(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _to_coords(value: Any) -> Optional[JobCoordinates]:
    if not isinstance(value, dict):
        return None
    lat = _as_float(value.get("lat"))
    lng = _as_float(value.get("lng"))
    if lat is None or lng is None:
        return None
    return JobCoordinates(lat=lat, lng=lng)


def _to_job(data: Dict[str, Any]) -> JobOpportunity:
    return JobOpportunity(
        company_name=_as_str(data.get("companyName")),
        address=_as_str(data.get("address")),
        contact_info=_as_str(data.get("contactInfo")),
        application_method=_as_str(data.get("applicationMethod")),
        urgency=_as_str(data.get("urgency")),
        requirements=_as_str_list(data.get("requirements")),
        coords=_to_coords(data.get("coords")),
        official_link=_as_str(data.get("officialLink")),
    )


def _to_jobs(value: Any) -> List[JobOpportunity]:
    return [_to_job(item) for item in _as_dicts(value)]


def _to_sector(data: Dict[str, Any]) -> InvestmentSector:
    return InvestmentSector(
        sector=_as_str(data.get("sector")),
        icon=_as_str(data.get("icon")),
        tips=[
            AdviceTip(title=_as_str(tip.get("title")), advice=_as_str(tip.get("advice")))
            for tip in _as_dicts(data.get("tips"))
        ],
    )


def _to_investment(value: Any) -> Optional[InvestmentStrategy]:
    if not isinstance(value, dict):
        return None

    capital = value.get("initialCapital")
    if isinstance(capital, bool) or not isinstance(capital, (int, float, str)):
        capital = None

    return InvestmentStrategy(
        initial_capital=capital,
        methodology=_as_str(value.get("methodology")),
        sectors=[_to_sector(sector) for sector in _as_dicts(value.get("sectors"))],
    )


# =============================================================================
# PUBLIC API
# =============================================================================

def interpret_reply(text: Optional[str], sources: Optional[List[str]] = None) -> SolonResult:
    """
    Interpret a raw model reply.

    Args:
        text: The model's reply text (may be None or empty)
        sources: Grounding URIs already extracted from the response

    Returns:
        SolonResult with every missing field defaulted

    Raises:
        SolonSyncError: When no parseable JSON object is present
    """
    parsed = locate_json_object(text or "")
    if parsed is None:
        logger.error(f"Could not parse Sólon reply; preview: {(text or '')[:200]!r}")
        raise SolonSyncError()

    result = SolonResult(
        profile_jobs=_to_jobs(parsed.get("profileJobs")),
        nearby_jobs=_to_jobs(parsed.get("nearbyJobs")),
        investment=_to_investment(parsed.get("investment")),
        sources=list(sources or []),
    )

    sector_count = len(result.investment.sectors) if result.investment else 0
    if result.investment and sector_count != INVESTMENT_SECTOR_COUNT:
        logger.info(f"Investment strategy has {sector_count} sectors; accepted as returned")

    return result


def extract_sources(response: Any) -> List[str]:
    """
    Collect web and maps URIs from grounding metadata.

    Absent metadata yields an empty list.
    """
    sources: List[str] = []

    try:
        candidates = getattr(response, "candidates", None)
        if not candidates:
            return sources

        metadata = getattr(candidates[0], "grounding_metadata", None)
        chunks = getattr(metadata, "grounding_chunks", None) if metadata else None
        if not chunks:
            return sources

        for chunk in chunks:
            web = getattr(chunk, "web", None)
            maps = getattr(chunk, "maps", None)
            uri = (getattr(web, "uri", None) if web else None) or (
                getattr(maps, "uri", None) if maps else None
            )
            if isinstance(uri, str) and uri:
                sources.append(uri)
    except (AttributeError, IndexError, TypeError) as e:
        logger.warning(f"Error extracting grounding sources: {e}")

    return sources
