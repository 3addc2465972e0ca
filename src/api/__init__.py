"""API module for FastAPI REST endpoints."""

from src.api.models import (
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    OptionItem,
    OptionsResponse,
)

__all__ = [
    "ErrorResponse",
    "GenerateRequest",
    "GenerateResponse",
    "OptionItem",
    "OptionsResponse",
]
