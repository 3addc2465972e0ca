"""Tests for settings and the LLM factory."""

from unittest.mock import patch


class TestSettings:
    """Test settings defaults."""

    def test_defaults(self, mock_settings):
        """Token budget and models have sensible defaults."""
        assert mock_settings.google_project_id == "test-project"
        assert mock_settings.llm_max_output_tokens == 800
        assert mock_settings.llm_model_lite == "gemini-2.0-flash-lite"
        assert mock_settings.is_production is False

    def test_env_override(self, monkeypatch):
        """Environment variables override defaults."""
        from src.config import Settings

        monkeypatch.setenv("LLM_MAX_OUTPUT_TOKENS", "400")
        monkeypatch.setenv("ENVIRONMENT", "prod")

        settings = Settings()

        assert settings.llm_max_output_tokens == 400
        assert settings.is_production is True


class TestGetLLM:
    """Test model selection."""

    def test_lite_model(self, mock_settings):
        """Lite quality picks the lite model with the default budget."""
        from src.llm import get_llm

        with (
            patch("src.llm.settings", mock_settings),
            patch("src.llm.ChatVertexAI") as mock_chat,
        ):
            get_llm(quality="lite")

        kwargs = mock_chat.call_args.kwargs
        assert kwargs["model_name"] == "gemini-2.0-flash-lite"
        assert kwargs["max_output_tokens"] == 800
        assert kwargs["temperature"] == mock_settings.llm_temperature
        assert kwargs["project"] == "test-project"

    def test_lite_disabled_falls_back_to_main_model(self, mock_settings):
        """With the lite flag off every call uses the main model."""
        from src.llm import get_llm

        mock_settings.use_lite_model = False
        with (
            patch("src.llm.settings", mock_settings),
            patch("src.llm.ChatVertexAI") as mock_chat,
        ):
            get_llm(quality="lite", temperature=0.1, max_output_tokens=200)

        kwargs = mock_chat.call_args.kwargs
        assert kwargs["model_name"] == "gemini-2.0-flash"
        assert kwargs["temperature"] == 0.1
        assert kwargs["max_output_tokens"] == 200
