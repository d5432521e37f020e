"""
Pytest configuration for Sólon backend tests.

Sets up test environment and global fixtures.
"""
import json
import os
from unittest.mock import MagicMock

import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")


def _sector(name: str, icon: str) -> dict:
    return {
        "sector": name,
        "icon": icon,
        "tips": [
            {"title": f"{name} consejo {i}", "advice": f"Explicación {i} para {name}"}
            for i in range(1, 5)
        ],
    }


@pytest.fixture
def full_investment() -> dict:
    """Investment strategy with the intended 4 sectors × 4 tips."""
    return {
        "initialCapital": 10,
        "methodology": "Crecimiento compuesto con aportaciones pequeñas y constantes",
        "sectors": [
            _sector("Criptoactivos", "fa-brands fa-bitcoin"),
            _sector("Índices", "fa-solid fa-chart-pie"),
            _sector("Divisas", "fa-solid fa-comments-dollar"),
            _sector("Materias Primas", "fa-solid fa-gem"),
        ],
    }


@pytest.fixture
def stub_reply_single_job() -> str:
    """Reply with one in-person job and no investment strategy, fenced in markdown."""
    payload = (
        '{"profileJobs": [{"companyName":"Tienda X","address":"Calle 1",'
        '"applicationMethod":"Presencial","urgency":"Alta","requirements":["Ventas"]}], '
        '"investment": null}'
    )
    return f"Aquí está tu hoja de ruta:\n```json\n{payload}\n```"


@pytest.fixture
def full_reply(full_investment) -> str:
    """Reply with profile jobs, nearby jobs and a complete strategy."""
    payload = {
        "profileJobs": [
            {
                "companyName": "Panadería La Espiga",
                "address": "Av. Insurgentes Sur 1200, CDMX",
                "contactInfo": "55 1234 5678",
                "applicationMethod": "Presencial",
                "urgency": "Alta",
                "requirements": ["Ventas", "Atención al cliente"],
            },
            {
                "companyName": "Grupo Comercial Norte",
                "address": "Paseo de la Reforma 250, CDMX",
                "applicationMethod": "Oficial",
                "urgency": "Media",
                "requirements": ["Excel"],
                "officialLink": "https://empleos.example.com/grupo-norte",
            },
        ],
        "nearbyJobs": [
            {
                "companyName": "Café Central",
                "coords": {"lat": 19.4326, "lng": -99.1332},
                "address": "Madero 10, Centro",
                "applicationMethod": "Presencial",
                "urgency": "Media",
            },
            {
                "companyName": "Farmacia Sin Ubicación",
                "address": "Desconocida",
                "applicationMethod": "Presencial",
            },
        ],
        "investment": full_investment,
    }
    return "```json\n" + json.dumps(payload, ensure_ascii=False) + "\n```"


@pytest.fixture
def make_gemini_response():
    """Factory for mocked google-genai responses."""

    def _make(text, uris=None):
        response = MagicMock()
        response.text = text
        candidate = MagicMock()
        if uris is None:
            candidate.grounding_metadata = None
        else:
            chunks = []
            for uri in uris:
                chunk = MagicMock()
                chunk.web = MagicMock(uri=uri)
                chunk.maps = None
                chunks.append(chunk)
            candidate.grounding_metadata = MagicMock(grounding_chunks=chunks)
        response.candidates = [candidate]
        return response

    return _make


@pytest.fixture
def mock_gemini_client():
    """Mock genai.Client; set models.generate_content in each test."""
    return MagicMock()
