"""
Pydantic schemas for the synchronized result returned by Sólon.

The model is asked for camelCase JSON; these models keep snake_case
attributes and serialize with camelCase aliases so API clients receive the
same shape the model was asked to produce.

Every field is nullable or defaulted. The interpreter never trusts the reply:
wrong-typed or missing fields arrive here as None or empty lists, and the
portal renders around them.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Values the prompt asks for. Documented, not enforced.
APPLICATION_METHOD_IN_PERSON = "Presencial"
APPLICATION_METHOD_OFFICIAL = "Oficial"
URGENCY_HIGH = "Alta"
URGENCY_MEDIUM = "Media"

SYNC_COMPLETE_TEXT = "Sincronización completa."


class CamelModel(BaseModel):
    """Base model serializing with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class JobCoordinates(CamelModel):
    """Point on the proximity map."""
    lat: float
    lng: float


class JobOpportunity(CamelModel):
    """A physical job lead produced by the model."""

    company_name: Optional[str] = Field(None, examples=["Tienda X"])
    address: Optional[str] = Field(None, examples=["Calle 1"])
    contact_info: Optional[str] = Field(
        None,
        description="Direct phone or e-mail",
        examples=["55 1234 5678"]
    )
    application_method: Optional[str] = Field(
        None,
        description="'Presencial' (walk in) or 'Oficial' (company portal)",
        examples=[APPLICATION_METHOD_IN_PERSON, APPLICATION_METHOD_OFFICIAL]
    )
    urgency: Optional[str] = Field(
        None,
        description="'Alta' or 'Media'",
        examples=[URGENCY_HIGH, URGENCY_MEDIUM]
    )
    requirements: List[str] = Field(default_factory=list)
    coords: Optional[JobCoordinates] = None
    official_link: Optional[str] = None


class AdviceTip(CamelModel):
    title: Optional[str] = None
    advice: Optional[str] = None


class InvestmentSector(CamelModel):
    """One of the four thematic pillars of the strategy."""
    sector: Optional[str] = Field(None, examples=["Criptoactivos"])
    icon: Optional[str] = Field(None, examples=["fa-brands fa-bitcoin"])
    tips: List[AdviceTip] = Field(default_factory=list)


class InvestmentStrategy(CamelModel):
    """
    Micro-investment roadmap.

    Intended shape is four sectors with four tips each. The shape is not
    verified; fewer or malformed entries are accepted as returned.
    """
    # int listed apart from float so a whole-number capital serializes as sent
    initial_capital: Optional[Union[int, float, str]] = Field(None, examples=[10])
    methodology: Optional[str] = None
    sectors: List[InvestmentSector] = Field(default_factory=list)


class SolonResult(CamelModel):
    """Outcome of one successful sync."""

    profile_jobs: List[JobOpportunity] = Field(
        default_factory=list,
        description="Direct-application leads matching the profile"
    )
    nearby_jobs: List[JobOpportunity] = Field(
        default_factory=list,
        description="Nearby businesses plotted on the proximity map"
    )
    investment: Optional[InvestmentStrategy] = None
    text: str = SYNC_COMPLETE_TEXT
    sources: List[str] = Field(
        default_factory=list,
        description="Web and maps URIs surfaced by grounding metadata"
    )
