"""
Tests for the Sólon sync service.

These tests use mocked Gemini responses to avoid actual API calls and
ensure deterministic test behavior.

Covers:
- Generation config: tools, temperature, location bias
- Successful sync with grounding sources
- Network/API failure and unparsable replies → SolonSyncError
- Client not configured
"""

from datetime import datetime
from unittest.mock import patch

import pytest
from google.genai import types

from solon.agents.solon.interpreter import SolonSyncError
from solon.agents.solon.prompts import compose_request
from solon.config import settings
from solon.schemas.profile import GeoCoordinates, UserProfile
from solon.services.solon_service import build_generation_config, sync_patterns

NOW = datetime(2026, 3, 2, 11, 15)


@pytest.fixture
def profile_cdmx():
    return UserProfile(location="Ciudad de México", country="México", skills="Ventas")


@pytest.fixture
def profile_with_coords():
    return UserProfile(
        location="Ciudad de México",
        skills="Cocina",
        coordinates=GeoCoordinates(latitude=19.4326, longitude=-99.1332),
    )


# =============================================================================
# UNIT TESTS: Generation config
# =============================================================================

class TestGenerationConfig:

    def test_tools_enabled(self, profile_cdmx):
        config = build_generation_config(compose_request(profile_cdmx, NOW), profile_cdmx)

        assert len(config.tools) == 2
        assert config.tools[0].google_search is not None
        assert config.tools[1].google_maps is not None

    def test_temperature_and_instruction(self, profile_cdmx):
        request = compose_request(profile_cdmx, NOW)
        config = build_generation_config(request, profile_cdmx)

        assert config.temperature == settings.GEMINI_TEMPERATURE
        assert config.system_instruction == request.system_instruction

    def test_no_json_mime_type(self, profile_cdmx):
        """The maps tool rejects response_mime_type='application/json'."""
        config = build_generation_config(compose_request(profile_cdmx, NOW), profile_cdmx)
        assert config.response_mime_type is None
        assert config.response_schema is None

    def test_no_location_bias_without_coordinates(self, profile_cdmx):
        config = build_generation_config(compose_request(profile_cdmx, NOW), profile_cdmx)
        assert config.tool_config is None

    def test_location_bias_with_coordinates(self, profile_with_coords):
        config = build_generation_config(
            compose_request(profile_with_coords, NOW), profile_with_coords
        )

        lat_lng = config.tool_config.retrieval_config.lat_lng
        assert isinstance(lat_lng, types.LatLng)
        assert lat_lng.latitude == pytest.approx(19.4326)
        assert lat_lng.longitude == pytest.approx(-99.1332)


# =============================================================================
# INTEGRATION TESTS: Mocked Gemini API
# =============================================================================

class TestSyncPatterns:

    @pytest.mark.asyncio
    async def test_successful_sync(
        self, profile_cdmx, full_reply, make_gemini_response, mock_gemini_client
    ):
        mock_gemini_client.models.generate_content.return_value = make_gemini_response(
            full_reply, uris=["https://web.example.com/empleos"]
        )

        with patch("solon.services.solon_service._get_gemini_client") as mock_client:
            mock_client.return_value = mock_gemini_client
            result = await sync_patterns(profile_cdmx, NOW)

        assert len(result.profile_jobs) == 2
        assert len(result.nearby_jobs) == 2
        assert len(result.investment.sectors) == 4
        assert result.sources == ["https://web.example.com/empleos"]

    @pytest.mark.asyncio
    async def test_single_call_with_prompt(
        self, profile_cdmx, stub_reply_single_job, make_gemini_response, mock_gemini_client
    ):
        mock_gemini_client.models.generate_content.return_value = make_gemini_response(
            stub_reply_single_job
        )

        with patch("solon.services.solon_service._get_gemini_client") as mock_client:
            mock_client.return_value = mock_gemini_client
            await sync_patterns(profile_cdmx, NOW)

        mock_gemini_client.models.generate_content.assert_called_once()
        kwargs = mock_gemini_client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == settings.GEMINI_MODEL
        assert "Ciudad de México" in kwargs["contents"]
        assert "Ventas" in kwargs["contents"]
        assert isinstance(kwargs["config"], types.GenerateContentConfig)

    @pytest.mark.asyncio
    async def test_api_failure_raises_sync_error(self, profile_cdmx, mock_gemini_client):
        mock_gemini_client.models.generate_content.side_effect = ConnectionError("network down")

        with patch("solon.services.solon_service._get_gemini_client") as mock_client:
            mock_client.return_value = mock_gemini_client
            with pytest.raises(SolonSyncError):
                await sync_patterns(profile_cdmx, NOW)

        # No retry
        assert mock_gemini_client.models.generate_content.call_count == 1

    @pytest.mark.asyncio
    async def test_unparsable_reply_raises_sync_error(
        self, profile_cdmx, make_gemini_response, mock_gemini_client
    ):
        mock_gemini_client.models.generate_content.return_value = make_gemini_response(
            "Lo siento, no puedo ayudar."
        )

        with patch("solon.services.solon_service._get_gemini_client") as mock_client:
            mock_client.return_value = mock_gemini_client
            with pytest.raises(SolonSyncError):
                await sync_patterns(profile_cdmx, NOW)

    @pytest.mark.asyncio
    async def test_empty_reply_raises_sync_error(
        self, profile_cdmx, make_gemini_response, mock_gemini_client
    ):
        mock_gemini_client.models.generate_content.return_value = make_gemini_response(None)

        with patch("solon.services.solon_service._get_gemini_client") as mock_client:
            mock_client.return_value = mock_gemini_client
            with pytest.raises(SolonSyncError):
                await sync_patterns(profile_cdmx, NOW)

    @pytest.mark.asyncio
    async def test_client_not_configured(self, profile_cdmx):
        with patch("solon.services.solon_service._get_gemini_client") as mock_client:
            mock_client.return_value = None
            with pytest.raises(SolonSyncError):
                await sync_patterns(profile_cdmx, NOW)

    @pytest.mark.asyncio
    async def test_zero_jobs_is_valid(
        self, profile_cdmx, make_gemini_response, mock_gemini_client
    ):
        mock_gemini_client.models.generate_content.return_value = make_gemini_response(
            '{"profileJobs": [], "nearbyJobs": [], "investment": null}'
        )

        with patch("solon.services.solon_service._get_gemini_client") as mock_client:
            mock_client.return_value = mock_gemini_client
            result = await sync_patterns(profile_cdmx, NOW)

        assert result.profile_jobs == []
        assert result.nearby_jobs == []
        assert result.investment is None
