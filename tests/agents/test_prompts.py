"""
Tests for the Sólon prompt builders (Request Composer).

Covers:
- Profile fields interpolated verbatim (location, country, skills)
- Response schema keys present in the system instruction
- Business rules (4 sectors × 4 tips, physical places in the location)
- current_time recorded but not rendered
"""

from datetime import datetime

import pytest

from solon.agents.solon.prompts import (
    SOLON_RESPONSE_SCHEMA,
    build_solon_system_prompt,
    build_solon_user_prompt,
    compose_request,
)
from solon.schemas.profile import UserProfile


@pytest.fixture
def profile_cdmx():
    return UserProfile(location="Ciudad de México", country="México", skills="Ventas")


class TestComposeRequest:
    """Tests for compose_request."""

    def test_contains_location_and_skills(self, profile_cdmx):
        request = compose_request(profile_cdmx, datetime(2026, 1, 5, 10, 0))
        combined = request.system_instruction + request.user_prompt

        assert "Ciudad de México" in combined
        assert "Ventas" in combined

    def test_schema_mentions_result_keys(self, profile_cdmx):
        request = compose_request(profile_cdmx, datetime(2026, 1, 5, 10, 0))

        for key in ("profileJobs", "nearbyJobs", "investment"):
            assert key in request.system_instruction

    def test_time_is_recorded_not_rendered(self, profile_cdmx):
        morning = compose_request(profile_cdmx, datetime(2026, 1, 5, 8, 0))
        night = compose_request(profile_cdmx, datetime(2026, 1, 5, 23, 0))

        assert morning.requested_at == datetime(2026, 1, 5, 8, 0)
        assert morning.system_instruction == night.system_instruction
        assert morning.user_prompt == night.user_prompt

    def test_is_pure(self, profile_cdmx):
        now = datetime(2026, 1, 5, 10, 0)
        assert compose_request(profile_cdmx, now) == compose_request(profile_cdmx, now)


class TestUserPrompt:
    """Tests for build_solon_user_prompt."""

    def test_includes_country(self):
        profile = UserProfile(location="Los Angeles, CA", country="Estados Unidos")
        prompt = build_solon_user_prompt(profile)
        assert "Los Angeles, CA, Estados Unidos" in prompt

    def test_empty_skills(self):
        profile = UserProfile(location="Monterrey")
        prompt = build_solon_user_prompt(profile)
        assert "Habilidades del usuario: ." in prompt

    def test_special_characters_passed_verbatim(self):
        """Profile text is not escaped or sanitized."""
        profile = UserProfile(
            location="Guadalajara {centro}",
            skills="<script>alert('x')</script> & \"Excel\"",
        )
        prompt = build_solon_user_prompt(profile)
        assert "Guadalajara {centro}" in prompt
        assert "<script>alert('x')</script> & \"Excel\"" in prompt

    def test_demographics_not_sent(self):
        profile = UserProfile(
            location="Puebla",
            experience="Cajero en supermercado durante dos años",
            age=42,
            sex="Femenino",
        )
        request = compose_request(profile, datetime(2026, 1, 5, 10, 0))
        combined = request.system_instruction + request.user_prompt

        assert "Cajero en supermercado" not in combined
        assert "Femenino" not in combined


class TestSystemPrompt:
    """Tests for build_solon_system_prompt."""

    def test_location_in_rules(self):
        prompt = build_solon_system_prompt("Tijuana")
        assert "lugares físicos reales en Tijuana" in prompt

    def test_sector_and_tip_rule(self):
        prompt = build_solon_system_prompt("Tijuana")
        assert "EXACTAMENTE 4 categorías con 4 consejos" in prompt

    def test_embeds_schema(self):
        prompt = build_solon_system_prompt("Tijuana")
        assert SOLON_RESPONSE_SCHEMA in prompt

    @pytest.mark.parametrize("sector", ["Criptoactivos", "Índices", "Divisas", "Materias Primas"])
    def test_schema_lists_sectors(self, sector):
        assert sector in SOLON_RESPONSE_SCHEMA
