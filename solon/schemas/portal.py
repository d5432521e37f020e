"""
View models for the portal.

These mirror what the portal screens display: the selection cards, the job
cards and proximity map, the investment roadmap, and the error state. Layout
and styling are left to the client.
"""

from typing import List, Literal, Optional

from pydantic import Field

from solon.schemas.solon import CamelModel, InvestmentStrategy

PortalStatus = Literal["form", "loading", "results", "error"]
PortalViewName = Literal["selection", "jobs", "investment"]
JobTab = Literal["profile", "map"]


class SelectionCard(CamelModel):
    """Entry point shown on the selection screen."""
    target_view: PortalViewName
    title: str
    description: str
    call_to_action: str
    icon: str


class JobCard(CamelModel):
    """A job lead ready for display."""
    company_name: Optional[str] = None
    address: Optional[str] = None
    contact_info: Optional[str] = None
    application_method: Optional[str] = None
    is_in_person: bool = False
    urgency: Optional[str] = None
    requirement_tags: List[str] = Field(default_factory=list)
    maps_search_url: Optional[str] = Field(
        None,
        description="Google Maps search link, present for in-person leads"
    )
    official_link: Optional[str] = Field(
        None,
        description="Company portal link, present for portal leads that carry one"
    )
    visit_tip: Optional[str] = None
    open_now_hint: Optional[str] = Field(
        None,
        description="Shown for in-person leads during business hours"
    )


class MapCenter(CamelModel):
    lat: float
    lng: float


class MapMarker(CamelModel):
    """Popup content for one nearby business."""
    lat: float
    lng: float
    company_name: Optional[str] = None
    address: Optional[str] = None
    urgency: Optional[str] = None
    maps_search_url: str


class MapView(CamelModel):
    center: MapCenter
    zoom: int = 13
    markers: List[MapMarker] = Field(default_factory=list)


class JobsView(CamelModel):
    active_tab: JobTab = "profile"
    cards: List[JobCard] = Field(default_factory=list)
    empty_message: Optional[str] = Field(
        None,
        description="Shown instead of cards when no direct leads were found"
    )
    map: MapView


class ErrorView(CamelModel):
    message: str
    reload_label: str


class PortalView(CamelModel):
    """Everything the portal screen needs for one render."""

    status: PortalStatus
    current_time: str = Field(..., description="Wall clock shown in the header, HH:MM:SS")
    active_view: PortalViewName = "selection"
    selection: List[SelectionCard] = Field(default_factory=list)
    jobs: Optional[JobsView] = None
    investment: Optional[InvestmentStrategy] = Field(
        None,
        description="Suppressed when the model returned no strategy"
    )
    sources: List[str] = Field(default_factory=list)
    reminder: Optional[str] = Field(
        None,
        description="Verification reminder shown outside the selection screen"
    )
    error: Optional[ErrorView] = None


class SharePayload(CamelModel):
    """Data handed to the browser share/clipboard capability."""
    title: str
    text: str
    url: str
