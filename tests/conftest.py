"""Pytest configuration and fixtures."""

import os

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel


def pytest_configure(config):
    """Set up test environment variables before tests run."""
    # Set required environment variables for testing
    os.environ.setdefault("GOOGLE_PROJECT_ID", "test-project")
    os.environ.setdefault("GOOGLE_LOCATION", "us-central1")


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from src.config import Settings

    return Settings(
        google_project_id="test-project",
        google_location="us-central1",
    )


WELL_FORMED_OUTPUT = """Here is your rhyme!

ENGLISH RHYME:
A teacher who lived in Peru
Once walked to the shop and she knew

CHILEAN PRONUNCIATION:
A tícher jú livd in Perú
Uans uókt tu de shop and shi niú

SPANISH TRANSLATION:
Una profesora que vivía en Perú
Una vez caminó a la tienda y sabía
"""


@pytest.fixture
def well_formed_output() -> str:
    """Model output with all three section headers in order."""
    return WELL_FORMED_OUTPUT


@pytest.fixture
def fake_llm_factory():
    """Build a fake chat model that replies with the given texts in order."""

    def _factory(*responses: str) -> FakeListChatModel:
        return FakeListChatModel(responses=list(responses))

    return _factory
