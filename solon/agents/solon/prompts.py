"""
Sólon Prompt Templates

Contains the system instruction and user prompt builders for the sync call.

Sólon uses Gemini with Google Search and Google Maps grounding to surface
real, physical job leads around the user and a micro-investment roadmap for
minimal capitals ($10, $20, $50, $100).

Architecture:
- Pattern: Grounded LLM (single API call with search + maps tools)
- Model: Gemini 2.5 Flash (googleMaps grounding requires the 2.5 series)
- Temperature: 0.3
- Output: JSON parsed from text (the maps tool rejects response_mime_type)

Profile text is interpolated verbatim. Nothing is escaped or sanitized.
"""

from dataclasses import dataclass
from datetime import datetime

from solon.schemas.profile import UserProfile

# =============================================================================
# RESPONSE SCHEMA
# =============================================================================
# Shown to the model as-is. Keys here are the contract the interpreter reads.
# =============================================================================

SOLON_RESPONSE_SCHEMA = """{
  "profileJobs": [
    {
      "companyName": "Nombre Empresa",
      "address": "Dirección Real",
      "contactInfo": "Teléfono o Email Directo",
      "applicationMethod": "Presencial" | "Oficial",
      "urgency": "Alta" | "Media",
      "requirements": ["Req 1", "Req 2"],
      "officialLink": "https://... (solo si applicationMethod es Oficial)"
    }
  ],
  "nearbyJobs": [
    {
      "companyName": "Negocio Cercano",
      "coords": {"lat": 0, "lng": 0},
      "address": "Dirección",
      "applicationMethod": "Presencial",
      "urgency": "Alta" | "Media"
    }
  ],
  "investment": {
    "initialCapital": 10,
    "methodology": "Breve descripción de la filosofía de crecimiento para capital bajo",
    "sectors": [
      {
        "sector": "Criptoactivos",
        "icon": "fa-brands fa-bitcoin",
        "tips": [
          {"title": "DCA en Activos Base", "advice": "Explicación breve..."},
          {"title": "Validación de Red", "advice": "..."},
          {"title": "Custodia Segura", "advice": "..."},
          {"title": "Micro-Ahorro Programado", "advice": "..."}
        ]
      },
      {"sector": "Índices", "icon": "fa-solid fa-chart-pie", "tips": [
        {"title": "...", "advice": "..."}, {"title": "...", "advice": "..."},
        {"title": "...", "advice": "..."}, {"title": "...", "advice": "..."}
      ]},
      {"sector": "Divisas", "icon": "fa-solid fa-comments-dollar", "tips": [
        {"title": "...", "advice": "..."}, {"title": "...", "advice": "..."},
        {"title": "...", "advice": "..."}, {"title": "...", "advice": "..."}
      ]},
      {"sector": "Materias Primas", "icon": "fa-solid fa-gem", "tips": [
        {"title": "...", "advice": "..."}, {"title": "...", "advice": "..."},
        {"title": "...", "advice": "..."}, {"title": "...", "advice": "..."}
      ]}
    ]
  }
}"""

INVESTMENT_SECTOR_COUNT = 4
TIPS_PER_SECTOR = 4
REQUESTED_JOB_COUNT = 4


@dataclass(frozen=True)
class SolonRequest:
    """Everything the sync call sends to Gemini, minus transport settings."""
    system_instruction: str
    user_prompt: str
    requested_at: datetime


# =============================================================================
# SYSTEM INSTRUCTION
# =============================================================================

def build_solon_system_prompt(location: str) -> str:
    """
    Build the system instruction for a sync.

    The instruction defines Sólon's role, the JSON shape and the business
    rules. The location is repeated in the rules so the maps tool is steered
    toward real places in that area.
    """
    return f"""Eres Sólon, un arquitecto de destinos financieros. Tu misión es proporcionar una hoja de ruta de inversión para capitales mínimos ($10, $20, $50, $100) y vacantes reales de aplicación directa.

<output_format>
IMPORTANTE: Responde ÚNICAMENTE con un objeto JSON válido dentro de un bloque de código markdown.
</output_format>

<response_schema>
{SOLON_RESPONSE_SCHEMA}
</response_schema>

<rules>
1. JOBS: Identifica lugares físicos reales en {location}. Da información de contacto directo.
2. INVERSIÓN: Genera EXACTAMENTE {INVESTMENT_SECTOR_COUNT} categorías con {TIPS_PER_SECTOR} consejos cada una.
3. NO incluyas texto fuera del JSON.
</rules>"""


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_solon_user_prompt(profile: UserProfile) -> str:
    """
    Build the user prompt from the profile.

    Args:
        profile: Submitted profile. Location, country and skills are
            interpolated verbatim.

    Returns:
        str: Formatted user prompt ready to be sent to Gemini
    """
    return f"""Analiza el mercado para la ubicación: {profile.location}, {profile.country}.
Habilidades del usuario: {profile.skills}.
Proporciona {REQUESTED_JOB_COUNT} vacantes directas reales y una estrategia de inversión integral de {INVESTMENT_SECTOR_COUNT} pilares."""


def compose_request(profile: UserProfile, current_time: datetime) -> SolonRequest:
    """
    Pair the fixed instruction template with the profile-derived prompt.

    current_time is recorded on the request but does not alter the text.
    """
    return SolonRequest(
        system_instruction=build_solon_system_prompt(profile.location),
        user_prompt=build_solon_user_prompt(profile),
        requested_at=current_time,
    )
