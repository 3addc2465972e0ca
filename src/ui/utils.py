"""Utility functions for the Streamlit UI."""

from enum import Enum

from src.chains.rhyme_generator import RhymeResult
from src.chains.rhyme_options import (
    CONTENT_FOCUS_LABELS,
    FLAVOUR_LABELS,
    RHYME_TYPE_LABELS,
    RhymeParameters,
    get_requirement,
)


def option_values(labels: dict[Enum, str]) -> list[str]:
    """Option values in display order for a selectbox."""
    return [option.value for option in labels]


def format_option(labels: dict[Enum, str], value: str) -> str:
    """Convert an option value to its display label.

    Args:
        labels: Label mapping keyed by enum member.
        value: Option value.

    Returns:
        Display label, or the value itself when unknown.
    """
    for option, label in labels.items():
        if option.value == value:
            return label
    return value


def describe_parameters(parameters: RhymeParameters) -> str:
    """One-line summary of the selections, e.g. "Limerick · Grammar Focus · Funny"."""
    parts = [
        format_option(RHYME_TYPE_LABELS, parameters.rhyme_type),
        format_option(CONTENT_FOCUS_LABELS, parameters.content_type),
    ]
    requirement = get_requirement(parameters.content_type)
    if requirement is not None:
        value = getattr(parameters, requirement.field)
        if requirement.choices is not None:
            value = format_option(requirement.choices, value)
        parts.append(value)
    if parameters.flavour:
        parts.append(format_option(FLAVOUR_LABELS, parameters.flavour))
    return " · ".join(part for part in parts if part)


def create_download_markdown(result: RhymeResult, parameters: RhymeParameters) -> str:
    """Create markdown content for download.

    Args:
        result: Generated rhyme.
        parameters: Selections used for the generation.

    Returns:
        Formatted markdown string.
    """
    lines = []

    lines.append("# Polyglot Rhyme")
    lines.append("")
    lines.append(describe_parameters(parameters))
    lines.append("")

    lines.append("## English Rhyme")
    lines.append("")
    lines.append(result.english_rhyme)
    lines.append("")

    lines.append("## Chilean Pronunciation Guide")
    lines.append("")
    lines.append(result.chilean_pronunciation)
    lines.append("")

    lines.append("## Spanish Translation")
    lines.append("")
    lines.append(result.spanish_translation)
    lines.append("")

    return "\n".join(lines)
