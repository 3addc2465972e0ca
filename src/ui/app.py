"""Streamlit web application for polyglot rhyme generation."""

import logging
import os

import streamlit as st

from src.chains.rhyme_options import (
    CONTENT_FOCUS_LABELS,
    FLAVOUR_LABELS,
    RHYME_TYPE_LABELS,
    RhymeParameters,
)
from src.ui.api_client import APIClient
from src.ui.controller import RhymeGeneratorController
from src.ui.state import RhymeFormState
from src.ui.utils import create_download_markdown, format_option, option_values

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Page configuration
st.set_page_config(
    page_title="Polyglot Rhyme Generator",
    page_icon="🇬🇧",
    layout="wide",
)

# Initialize API client
api_client = APIClient()

FIELD_NAMES = list(RhymeParameters.model_fields)


def _widget_key(field: str) -> str:
    return f"input_{field}"


def init_session_state():
    """Initialize session state variables."""
    if "form_state" not in st.session_state:
        st.session_state.form_state = RhymeFormState()


def get_controller() -> RhymeGeneratorController:
    """Controller bound to this session's form state."""
    return RhymeGeneratorController(
        api_client,
        user=st.session_state.get("user"),
        state=st.session_state.form_state,
    )


def sync_form_state():
    """Copy widget values into the form state."""
    state: RhymeFormState = st.session_state.form_state
    for field in FIELD_NAMES:
        setattr(state, field, st.session_state.get(_widget_key(field)) or "")


def reset_form():
    """Reset button callback; runs before widgets are re-created."""
    if not get_controller().reset():
        return
    for field in FIELD_NAMES:
        st.session_state[_widget_key(field)] = "" if field == "context" else None


def render_sidebar():
    """Render sidebar with API status."""
    with st.sidebar:
        st.title("⚙️ Settings")

        st.subheader("API status")
        if api_client.health_check():
            st.success("✅ API connection OK")
        else:
            st.error("❌ API connection error")
            st.caption("Start the API server first")

        st.divider()
        st.caption("Polyglot Rhyme Generator v0.1.0")


def _select(label: str, field: str, labels: dict, placeholder: str):
    st.selectbox(
        label,
        options=option_values(labels),
        index=None,
        format_func=lambda value: format_option(labels, value),
        placeholder=placeholder,
        key=_widget_key(field),
    )


def render_parameter_section():
    """Render the parameter form with its conditional field and actions."""
    st.header("✨ Rhyme Parameters")

    _select("Rhyme Type", "rhyme_type", RHYME_TYPE_LABELS, "Select a rhyme type")
    _select("Content Focus", "content_type", CONTENT_FOCUS_LABELS, "Select content focus")
    _select("Flavour", "flavour", FLAVOUR_LABELS, "Select tone and style (optional)")

    sync_form_state()
    state: RhymeFormState = st.session_state.form_state

    requirement = state.visible_requirement
    if requirement is not None:
        if requirement.choices is None:
            st.text_input(
                requirement.label,
                placeholder=requirement.placeholder,
                key=_widget_key(requirement.field),
            )
        else:
            _select(
                requirement.label,
                requirement.field,
                requirement.choices,
                requirement.placeholder,
            )
        sync_form_state()

    col1, col2 = st.columns([4, 1])
    with col1:
        generate_button = st.button(
            "✨ Generate Rhyme",
            type="primary",
            disabled=not state.can_generate,
            use_container_width=True,
        )
    with col2:
        st.button(
            "↺",
            help="Reset",
            disabled=state.is_generating,
            on_click=reset_form,
            use_container_width=True,
        )

    if generate_button:
        with st.spinner("Generating..."):
            get_controller().generate()


def _render_result_card(title: str, text: str):
    st.subheader(title)
    with st.container(border=True):
        st.text(text)


def render_result_section():
    """Render the three result fragments or the empty state."""
    state: RhymeFormState = st.session_state.form_state

    if state.result is None:
        if not state.is_generating:
            st.info(
                "**Ready to Generate Your Rhyme**\n\n"
                'Select your parameters and click "Generate Rhyme" to create a '
                "personalized learning experience"
            )
        return

    result = state.result
    _render_result_card("🇬🇧 English Rhyme", result.english_rhyme)
    _render_result_card("🔊 Chilean Pronunciation Guide", result.chilean_pronunciation)
    _render_result_card("🇨🇱 Spanish Translation", result.spanish_translation)

    st.download_button(
        label="📥 Download as Markdown",
        data=create_download_markdown(result, state.result_parameters or state.to_parameters()),
        file_name="rhyme.md",
        mime="text/markdown",
    )


def main():
    """Main application entry point."""
    init_session_state()

    st.title("🇬🇧 Polyglot Rhyme Generator 🇨🇱")
    st.caption("Learn English through personalized rhymes with Chilean pronunciation guides")

    render_sidebar()

    col1, col2 = st.columns([1, 1])

    with col1:
        render_parameter_section()

    with col2:
        render_result_section()


if __name__ == "__main__":
    main()
