"""Tests for the Streamlit page."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from src.chains.rhyme_generator import RhymeResult

APP_PATH = Path(__file__).resolve().parent.parent / "src" / "ui" / "app.py"

SAMPLE_RESULT = RhymeResult(
    english_rhyme="A cat in a hat\nsat on a mat",
    chilean_pronunciation="A kat in a jat\nsat on a mat",
    spanish_translation="Un gato con sombrero\nse sentó en una alfombra",
)


@pytest.fixture
def app(monkeypatch):
    """App with the backend replaced by canned responses."""
    monkeypatch.setattr("src.ui.api_client.APIClient.health_check", lambda self: True)
    monkeypatch.setattr(
        "src.ui.api_client.APIClient.generate", lambda self, parameters: SAMPLE_RESULT
    )
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    return at


def _fill_form(at):
    at.selectbox(key="input_rhyme_type").select("limerick")
    at.selectbox(key="input_content_type").select("high-frequency")
    at.run()


class TestRhymePage:
    """Test the rendered page."""

    def test_empty_state(self, app):
        """Fresh page shows the empty state and a disabled generate button."""
        assert not app.exception
        assert "Ready to Generate Your Rhyme" in app.info[0].value
        assert app.button[0].disabled is True

    def test_conditional_field_shown_for_grammar(self, app):
        """Grammar focus adds the grammar topic select."""
        app.selectbox(key="input_content_type").select("grammar").run()

        assert app.selectbox(key="input_grammar_topic").label == "Grammar Topic"

    def test_generate_renders_sections(self, app):
        """Generating shows all three sections verbatim."""
        _fill_form(app)
        assert app.button[0].disabled is False

        app.button[0].click().run()

        texts = [element.value for element in app.text]
        assert SAMPLE_RESULT.english_rhyme in texts
        assert SAMPLE_RESULT.chilean_pronunciation in texts
        assert SAMPLE_RESULT.spanish_translation in texts
        assert app.session_state.form_state.result == SAMPLE_RESULT

    def test_reset_clears_form_and_result(self, app):
        """Reset returns the page to its empty state."""
        _fill_form(app)
        app.button[0].click().run()

        app.button[1].click().run()

        assert app.session_state.form_state.result is None
        assert app.session_state["input_rhyme_type"] is None
        assert "Ready to Generate Your Rhyme" in app.info[0].value
        assert app.button[0].disabled is True
