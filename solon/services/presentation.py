"""
View-model builders for the portal screens.

Pure functions: each takes interpreted results (plus the current time where
the display depends on it) and returns what the screen shows. Missing
optional fields render as nothing, never as errors.
"""

from datetime import datetime
from typing import List, Optional
from urllib.parse import quote

from solon.schemas.portal import (
    ErrorView,
    JobCard,
    JobsView,
    JobTab,
    MapCenter,
    MapMarker,
    MapView,
    SelectionCard,
    SharePayload,
)
from solon.schemas.profile import UserProfile
from solon.schemas.solon import APPLICATION_METHOD_IN_PERSON, JobOpportunity
from solon.utils.clock import is_favorable_time

MAPS_SEARCH_URL = "https://www.google.com/maps/search/"

# Geographic center of México, used when the browser shared no location
DEFAULT_MAP_CENTER = MapCenter(lat=23.6345, lng=-102.5528)
DEFAULT_MAP_ZOOM = 13

NO_JOBS_MESSAGE = "No se detectaron vacantes de aplicación directa en este ciclo de 5 días."
VISIT_TIP = "Tip: Presentar CV en recepción preguntando por vacantes."
OPEN_NOW_HINT = "Negocio Abierto: Recomendado visitar ahora"
SYNC_ERROR_MESSAGE = (
    "No pude sincronizar los patrones del mercado en este momento. Inténtalo de nuevo."
)
RELOAD_LABEL = "Re-establecer Conexión"
VERIFICATION_REMINDER = (
    "Toda la información presentada ha sido sincronizada a partir de patrones de mercado "
    "recientes analizados por Sólon. La naturaleza del entorno es dinámica; por ello, "
    "instamos a los usuarios a corroborar telefónicamente las vacantes y direcciones "
    "antes de iniciar cualquier traslado físico."
)
SHARE_TITLE = "Portal de Sólon"
SHARE_TEXT = "Identifica tus patrones para reclamar tu destino: vacantes directas y estrategia de micro-inversión."

SELECTION_CARDS = [
    SelectionCard(
        target_view="jobs",
        title="Oportunidades",
        description=(
            "Acceso a vacantes directas con contacto telefónico y rutas para "
            "aplicación física inmediata."
        ),
        call_to_action="Ingresar al Patrón",
        icon="fa-solid fa-briefcase",
    ),
    SelectionCard(
        target_view="investment",
        title="Estrategia Inicia",
        description=(
            "Centro de comando para micro-capitales ($10-$100) en sectores de alto "
            "potencial educativo."
        ),
        call_to_action="Ver Hoja de Ruta",
        icon="fa-solid fa-chart-line",
    ),
]


def maps_search_url(*parts: Optional[str]) -> str:
    """Google Maps search link for the given text parts."""
    query = " ".join(part for part in parts if part)
    return MAPS_SEARCH_URL + quote(query, safe="!*'()")


def build_job_card(job: JobOpportunity, now: datetime) -> JobCard:
    """
    Build the card for one job lead.

    In-person leads get a maps link, a visit tip and, during business hours,
    the open-now hint. Portal leads get their official link when present.
    """
    in_person = job.application_method == APPLICATION_METHOD_IN_PERSON

    return JobCard(
        company_name=job.company_name,
        address=job.address,
        contact_info=job.contact_info or None,
        application_method=job.application_method,
        is_in_person=in_person,
        urgency=job.urgency,
        requirement_tags=list(job.requirements),
        maps_search_url=maps_search_url(job.company_name, job.address) if in_person else None,
        official_link=job.official_link if not in_person else None,
        visit_tip=VISIT_TIP if in_person else None,
        open_now_hint=OPEN_NOW_HINT if in_person and is_favorable_time(now) else None,
    )


def build_map_view(jobs: List[JobOpportunity], profile: Optional[UserProfile]) -> MapView:
    """Center on the user when coordinates are known; one marker per located job."""
    center = DEFAULT_MAP_CENTER
    if profile is not None and profile.coordinates is not None:
        center = MapCenter(
            lat=profile.coordinates.latitude,
            lng=profile.coordinates.longitude,
        )

    markers = [
        MapMarker(
            lat=job.coords.lat,
            lng=job.coords.lng,
            company_name=job.company_name,
            address=job.address,
            urgency=job.urgency,
            maps_search_url=maps_search_url(job.address),
        )
        for job in jobs
        if job.coords is not None
    ]

    return MapView(center=center, zoom=DEFAULT_MAP_ZOOM, markers=markers)


def build_jobs_view(
    profile_jobs: List[JobOpportunity],
    nearby_jobs: List[JobOpportunity],
    profile: Optional[UserProfile],
    now: datetime,
    active_tab: JobTab = "profile",
) -> JobsView:
    cards = [build_job_card(job, now) for job in profile_jobs]
    return JobsView(
        active_tab=active_tab,
        cards=cards,
        empty_message=None if cards else NO_JOBS_MESSAGE,
        map=build_map_view(nearby_jobs, profile),
    )


def build_error_view(message: str = SYNC_ERROR_MESSAGE) -> ErrorView:
    return ErrorView(message=message, reload_label=RELOAD_LABEL)


def build_share_payload(url: str) -> SharePayload:
    return SharePayload(title=SHARE_TITLE, text=SHARE_TEXT, url=url)
