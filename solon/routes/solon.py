"""
FastAPI routes for the Sólon sync flow.

Endpoints:
- POST /solon/sync: Submit a profile, receive the interpreted result
- POST /solon/portal: Submit a profile, receive the rendered portal view
- GET /solon/share: Share payload for the browser share/clipboard capability

All endpoints are public. Each request makes at most one Gemini call.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from solon.agents.solon.interpreter import SolonSyncError
from solon.config import settings
from solon.schemas.portal import JobTab, PortalView, PortalViewName, SharePayload
from solon.schemas.profile import UserProfile
from solon.schemas.solon import SolonResult
from solon.services.portal import PortalSession
from solon.services.presentation import SYNC_ERROR_MESSAGE, build_share_payload
from solon.services.solon_service import sync_patterns
from solon.utils.clock import Clock, get_clock
from solon.utils.logging import preview

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/solon",
    tags=["solon"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/sync",
    response_model=SolonResult,
    status_code=200,
    summary="Synchronize job leads and investment strategy",
    description="""
    Sends the profile to Gemini with Google Search and Google Maps grounding
    and returns the interpreted result.

    **Outcomes:**
    - 200: profileJobs / nearbyJobs (possibly empty), investment (or null), sources
    - 502: sync failed (network/API error or unparsable reply), generic message
    - 422: invalid profile

    There is no retry; the client reloads to try again.
    """
)
async def sync_endpoint(
    profile: UserProfile,
    clock: Clock = Depends(get_clock)
) -> SolonResult:
    logger.info(f"POST /solon/sync called, location='{preview(profile.location)}'")

    try:
        result = await sync_patterns(profile, clock.now())
    except SolonSyncError as e:
        logger.error(f"Sync failed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "sync_failed",
                "details": SYNC_ERROR_MESSAGE
            }
        )

    logger.info(f"Returning {len(result.profile_jobs)} profile jobs")
    return result


@router.post(
    "/portal",
    response_model=PortalView,
    status_code=200,
    summary="Submit a profile and render the portal",
    description="""
    Runs one sync and returns the view model of the portal screen.

    Query parameters pick the active view (selection, jobs, investment) and
    the jobs sub-tab (profile list or proximity map). A failed sync renders
    the error state with a reload affordance instead of an empty result.
    """
)
async def portal_endpoint(
    profile: UserProfile,
    view: PortalViewName = "selection",
    tab: JobTab = "profile",
    clock: Clock = Depends(get_clock)
) -> PortalView:
    logger.info(f"POST /solon/portal called, view={view}, tab={tab}")

    session = PortalSession()
    await session.submit(profile, sync_patterns, clock.now())
    session.show(view)
    session.select_job_tab(tab)

    rendered = session.render(clock.now())
    logger.info(f"Rendered portal with status={rendered.status}")
    return rendered


@router.get(
    "/share",
    response_model=SharePayload,
    status_code=200,
    summary="Share payload",
    description="Title, text and URL for navigator.share or the clipboard fallback."
)
async def share_endpoint(request: Request) -> SharePayload:
    url = settings.PUBLIC_APP_URL or str(request.base_url)
    return build_share_payload(url)
