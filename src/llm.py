"""LLM factory functions for 2-tier model configuration.

Provides centralized LLM instance creation with quality-based model selection:
- "high": gemini-2.0-flash for quality-sensitive tasks
- "lite": gemini-2.0-flash-lite for short creative tasks such as rhymes
"""

from langchain_google_vertexai import ChatVertexAI

from src.config import settings


def get_llm(
    quality: str = "high",
    temperature: float | None = None,
    max_output_tokens: int | None = None,
) -> ChatVertexAI:
    """Get LLM instance based on quality level.

    Args:
        quality: Model quality level
            - "high": Use settings.llm_model
            - "lite": Use settings.llm_model_lite (when use_lite_model is enabled)
        temperature: Override default temperature. If None, uses settings.llm_temperature.
        max_output_tokens: Override the output token budget.
            If None, uses settings.llm_max_output_tokens.

    Returns:
        ChatVertexAI instance configured with the appropriate model.

    Examples:
        >>> llm = get_llm(quality="lite")
        >>> llm = get_llm(quality="high", temperature=0.2, max_output_tokens=400)
    """
    if quality == "lite" and settings.use_lite_model:
        model = settings.llm_model_lite
    else:
        model = settings.llm_model

    temp = temperature if temperature is not None else settings.llm_temperature
    max_tokens = (
        max_output_tokens if max_output_tokens is not None else settings.llm_max_output_tokens
    )

    return ChatVertexAI(
        model_name=model,
        project=settings.google_project_id,
        location=settings.google_location,
        temperature=temp,
        max_output_tokens=max_tokens,
    )
