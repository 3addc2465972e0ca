"""State management models for the Streamlit UI."""

from pydantic import Field

from src.chains.rhyme_generator import RhymeResult
from src.chains.rhyme_options import (
    FieldRequirement,
    RhymeParameters,
    get_requirement,
    missing_required_fields,
)


class RhymeFormState(RhymeParameters):
    """Parameter form selections plus the generation result."""

    result: RhymeResult | None = Field(default=None, description="Latest generated rhyme")
    result_parameters: RhymeParameters | None = Field(
        default=None, description="Selections that produced the result"
    )
    is_generating: bool = Field(default=False, description="Generation in progress")

    def to_parameters(self) -> RhymeParameters:
        """Snapshot of the six selections."""
        return RhymeParameters(**self.model_dump(include=set(RhymeParameters.model_fields)))

    @property
    def visible_requirement(self) -> FieldRequirement | None:
        """Conditional field shown for the current content focus, if any."""
        return get_requirement(self.content_type)

    @property
    def missing_fields(self) -> list[str]:
        return missing_required_fields(self)

    @property
    def can_generate(self) -> bool:
        """Generate button is enabled only for complete selections and when idle."""
        return not self.is_generating and not self.missing_fields

    def reset(self) -> None:
        """Clear all selections and the result."""
        for name, field in RhymeParameters.model_fields.items():
            setattr(self, name, field.default)
        self.result = None
        self.result_parameters = None
