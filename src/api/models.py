"""API request and response models."""

from enum import Enum

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.chains.rhyme_options import (
    CEFRLevel,
    ContentFocus,
    Flavour,
    GrammarTopic,
    RhymeParameters,
    RhymeType,
)

_CHOICE_FIELDS: dict[str, type[Enum]] = {
    "rhyme_type": RhymeType,
    "content_type": ContentFocus,
    "grammar_topic": GrammarTopic,
    "cefr_level": CEFRLevel,
    "flavour": Flavour,
}


class GenerateRequest(RhymeParameters):
    """Request model for rhyme generation.

    Choice fields accept "" (unset) or one of their option values.
    """

    @field_validator(*_CHOICE_FIELDS)
    @classmethod
    def validate_choice(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            return value
        enum_cls = _CHOICE_FIELDS[info.field_name]
        allowed = [member.value for member in enum_cls]
        if value not in allowed:
            raise ValueError(f"must be one of {allowed}")
        return value

    def to_parameters(self) -> RhymeParameters:
        """Drop request-only validation and return plain parameters."""
        return RhymeParameters(**self.model_dump())


class GenerateResponse(BaseModel):
    """Response model for rhyme generation."""

    english_rhyme: str = Field(description="Rhyme in English")
    chilean_pronunciation: str = Field(description="Chilean Spanish phonetic guide")
    spanish_translation: str = Field(description="Spanish translation")


class OptionItem(BaseModel):
    """Single selectable option."""

    value: str = Field(description="Option value sent back in requests")
    label: str = Field(description="Display label")


class OptionsResponse(BaseModel):
    """Option catalogs for building the parameter form."""

    rhyme_types: list[OptionItem] = Field(description="Rhyme types")
    content_types: list[OptionItem] = Field(description="Content focus options")
    grammar_topics: list[OptionItem] = Field(description="Grammar topics")
    cefr_levels: list[OptionItem] = Field(description="CEFR levels")
    flavours: list[OptionItem] = Field(description="Tone options")
    required_fields: dict[str, str] = Field(
        description="Extra required field name per content focus value"
    )


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(description="Error type")
    detail: str = Field(description="Error detail")
