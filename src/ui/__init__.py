"""UI module for Streamlit web interface."""

from src.ui.api_client import APIClient
from src.ui.controller import RhymeGeneratorController
from src.ui.state import RhymeFormState
from src.ui.utils import (
    create_download_markdown,
    describe_parameters,
    format_option,
    option_values,
)

__all__ = [
    "APIClient",
    "RhymeFormState",
    "RhymeGeneratorController",
    "create_download_markdown",
    "describe_parameters",
    "format_option",
    "option_values",
]
