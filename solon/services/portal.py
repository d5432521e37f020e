"""
Portal session state.

One PortalSession models the state the portal screen holds for its lifetime:
the submitted profile, the loading flag, the last result or error, and the
active view. Nothing is persisted; a reload starts a new session.

View switches are plain enumerated assignments. The only "retry" is a new
session.
"""

import logging
from datetime import datetime
from typing import Awaitable, Callable, Optional

from solon.agents.solon.interpreter import SolonSyncError
from solon.schemas.portal import JobTab, PortalView, PortalViewName
from solon.schemas.profile import UserProfile
from solon.schemas.solon import SolonResult
from solon.services.presentation import (
    SELECTION_CARDS,
    SYNC_ERROR_MESSAGE,
    VERIFICATION_REMINDER,
    build_error_view,
    build_jobs_view,
)

logger = logging.getLogger(__name__)

SyncFunction = Callable[[UserProfile, datetime], Awaitable[SolonResult]]


class SubmissionInProgressError(Exception):
    """A profile was submitted while the previous sync had not settled."""


class PortalSession:
    """State of one portal screen."""

    def __init__(self):
        self.profile: Optional[UserProfile] = None
        self.loading: bool = False
        self.error: Optional[str] = None
        self.results: Optional[SolonResult] = None
        self.view: PortalViewName = "selection"
        self.job_tab: JobTab = "profile"

    async def submit(self, profile: UserProfile, sync: SyncFunction, now: datetime) -> None:
        """
        Submit a profile and wait for its single sync to settle.

        Previous results are discarded. Any failure leaves the session in the
        generic error state with no results.

        Raises:
            SubmissionInProgressError: If a sync is already running
        """
        if self.loading:
            raise SubmissionInProgressError("A sync is already in progress")

        self.profile = profile
        self.loading = True
        self.error = None
        self.results = None

        try:
            self.results = await sync(profile, now)
            self.view = "selection"
        except SolonSyncError as e:
            logger.error(f"Sync failed: {e.message}")
            self.error = SYNC_ERROR_MESSAGE
        except Exception as e:
            logger.error(f"Unexpected sync failure: {e}", exc_info=True)
            self.error = SYNC_ERROR_MESSAGE
        finally:
            self.loading = False

    def show(self, view: PortalViewName) -> None:
        self.view = view

    def select_job_tab(self, tab: JobTab) -> None:
        self.job_tab = tab

    def render(self, now: datetime) -> PortalView:
        """Compute the view model for the current state."""
        clock_text = now.strftime("%H:%M:%S")

        if self.profile is None:
            return PortalView(status="form", current_time=clock_text)

        if self.loading:
            return PortalView(status="loading", current_time=clock_text)

        if self.results is None:
            return PortalView(
                status="error",
                current_time=clock_text,
                error=build_error_view(self.error or SYNC_ERROR_MESSAGE),
            )

        results = self.results
        return PortalView(
            status="results",
            current_time=clock_text,
            active_view=self.view,
            selection=list(SELECTION_CARDS),
            jobs=build_jobs_view(
                results.profile_jobs,
                results.nearby_jobs,
                self.profile,
                now,
                active_tab=self.job_tab,
            ),
            investment=results.investment,
            sources=list(results.sources),
            reminder=VERIFICATION_REMINDER if self.view != "selection" else None,
        )
