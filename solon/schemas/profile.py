"""
Pydantic schemas for the user profile submitted from the portal form.

A profile is created once per submission and never mutated afterwards.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUPPORTED_COUNTRIES = ("México", "Estados Unidos")


class GeoCoordinates(BaseModel):
    """Best-effort browser geolocation. Absent when denied or unavailable."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, examples=[19.4326])
    longitude: float = Field(..., ge=-180, le=180, examples=[-99.1332])


class UserProfile(BaseModel):
    """
    Job-search context collected by the portal form.

    Only location, country and skills reach the model prompt. Age, sex and
    experience are collected for completeness and kept on the session.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "country": "México",
                "location": "Ciudad de México",
                "experience": "Ninguna",
                "skills": "Ventas, Atención al cliente",
                "age": 18,
                "sex": "Otro",
                "coordinates": {"latitude": 19.4326, "longitude": -99.1332},
            }
        },
    )

    country: Literal["México", "Estados Unidos"] = Field(
        "México",
        description="Country where jobs are searched"
    )
    location: str = Field(
        ...,
        description="City, state or postal code",
        min_length=1,
        max_length=200,
        examples=["Ciudad de México", "Los Angeles, CA"]
    )
    experience: str = Field(
        "",
        description="Previous jobs, or 'Ninguna' for a first job",
        max_length=2000
    )
    skills: str = Field(
        "",
        description="Free-text key skills",
        max_length=1000,
        examples=["Cocina, Ventas, Excel, Atención al cliente"]
    )
    age: int = Field(18, ge=16, le=99)
    sex: Literal["Masculino", "Femenino", "Otro"] = "Otro"
    coordinates: Optional[GeoCoordinates] = None

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("location must not be blank")
        return v
