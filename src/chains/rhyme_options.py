"""Selectable rhyme parameters and the rules that tie them together."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class RhymeType(str, Enum):
    """Poetic form of the generated rhyme."""

    LIMERICK = "limerick"
    RAP = "rap"
    HAIKU = "haiku"
    SORTING_HAT = "sorting-hat"


class ContentFocus(str, Enum):
    """Pedagogical dimension the rhyme should emphasize."""

    HIGH_FREQUENCY = "high-frequency"
    CONTEXT_SPECIFIC = "context-specific"
    PRONUNCIATION = "pronunciation"
    GRAMMAR = "grammar"
    CONNECTORS = "connectors"
    LEVEL_BASED = "level-based"


class GrammarTopic(str, Enum):
    """Grammar point for the grammar content focus."""

    PRESENT_SIMPLE = "present-simple"
    PRESENT_CONTINUOUS = "present-continuous"
    PAST_SIMPLE = "past-simple"
    PAST_CONTINUOUS = "past-continuous"
    PRESENT_PERFECT = "present-perfect"
    FUTURE_SIMPLE = "future-simple"
    CONDITIONALS = "conditionals"
    PASSIVE_VOICE = "passive-voice"
    MODAL_VERBS = "modal-verbs"
    PHRASAL_VERBS = "phrasal-verbs"
    PREPOSITIONS = "prepositions"
    ARTICLES = "articles"


class CEFRLevel(str, Enum):
    """Common European Framework of Reference level."""

    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"


class Flavour(str, Enum):
    """Optional tone modifier."""

    WITTY = "witty"
    FORMAL = "formal"
    CASUAL = "casual"
    PROFOUND = "profound"
    FUNNY = "funny"


RHYME_TYPE_LABELS: dict[RhymeType, str] = {
    RhymeType.LIMERICK: "Limerick",
    RhymeType.RAP: "Rap",
    RhymeType.HAIKU: "Haiku",
    RhymeType.SORTING_HAT: "Sorting Hat Song",
}

CONTENT_FOCUS_LABELS: dict[ContentFocus, str] = {
    ContentFocus.HIGH_FREQUENCY: "High Frequency Vocabulary",
    ContentFocus.CONTEXT_SPECIFIC: "Context Specific Vocabulary",
    ContentFocus.PRONUNCIATION: "Pronunciation Practice",
    ContentFocus.GRAMMAR: "Grammar Focus",
    ContentFocus.CONNECTORS: "Connectors & Linking Words",
    ContentFocus.LEVEL_BASED: "CEFR Level Based",
}

GRAMMAR_TOPIC_LABELS: dict[GrammarTopic, str] = {
    GrammarTopic.PRESENT_SIMPLE: "Present Simple",
    GrammarTopic.PRESENT_CONTINUOUS: "Present Continuous",
    GrammarTopic.PAST_SIMPLE: "Past Simple",
    GrammarTopic.PAST_CONTINUOUS: "Past Continuous",
    GrammarTopic.PRESENT_PERFECT: "Present Perfect",
    GrammarTopic.FUTURE_SIMPLE: "Future Simple",
    GrammarTopic.CONDITIONALS: "Conditionals",
    GrammarTopic.PASSIVE_VOICE: "Passive Voice",
    GrammarTopic.MODAL_VERBS: "Modal Verbs",
    GrammarTopic.PHRASAL_VERBS: "Phrasal Verbs",
    GrammarTopic.PREPOSITIONS: "Prepositions",
    GrammarTopic.ARTICLES: "Articles (a, an, the)",
}

CEFR_LEVEL_LABELS: dict[CEFRLevel, str] = {
    CEFRLevel.A1: "A1 - Beginner",
    CEFRLevel.A2: "A2 - Elementary",
    CEFRLevel.B1: "B1 - Intermediate",
    CEFRLevel.B2: "B2 - Upper Intermediate",
    CEFRLevel.C1: "C1 - Advanced",
    CEFRLevel.C2: "C2 - Proficient",
}

FLAVOUR_LABELS: dict[Flavour, str] = {
    Flavour.WITTY: "Witty",
    Flavour.FORMAL: "Formal",
    Flavour.CASUAL: "Casual",
    Flavour.PROFOUND: "Profound",
    Flavour.FUNNY: "Funny",
}


class RhymeParameters(BaseModel):
    """The six user selections that drive one generation."""

    rhyme_type: str = Field(default="", description="Rhyme type (RhymeType value)")
    content_type: str = Field(default="", description="Content focus (ContentFocus value)")
    context: str = Field(default="", description="Free-text context for context-specific focus")
    grammar_topic: str = Field(default="", description="Grammar topic (GrammarTopic value)")
    cefr_level: str = Field(default="", description="CEFR level (CEFRLevel value)")
    flavour: str = Field(default="", description="Optional tone (Flavour value)")


def humanize(value: str) -> str:
    """Turn an option value such as "past-simple" into prompt text ("past simple")."""
    return value.replace("-", " ")


def _is_member(enum_cls: type[Enum]) -> Callable[[str], bool]:
    values = {member.value for member in enum_cls}
    return lambda value: value in values


@dataclass(frozen=True)
class FieldRequirement:
    """Extra field a content focus makes mandatory.

    Attributes:
        field: Attribute name on RhymeParameters.
        label: Form label for the field.
        placeholder: Form placeholder for the field.
        validator: Returns True when the field value is acceptable.
        clause: Prompt sentence template filled with "{value}".
        choices: Option labels when the field is a select, None for free text.
    """

    field: str
    label: str
    placeholder: str
    validator: Callable[[str], bool]
    clause: str
    choices: dict | None = None

    def is_satisfied(self, parameters: RhymeParameters) -> bool:
        return self.validator(getattr(parameters, self.field))

    def prompt_clause(self, parameters: RhymeParameters) -> str:
        value = getattr(parameters, self.field)
        if not value:
            return ""
        # Option values are slugs; free text goes in as typed
        if self.choices is not None:
            value = humanize(value)
        return self.clause.format(value=value)


FOCUS_REQUIREMENTS: dict[ContentFocus, FieldRequirement] = {
    ContentFocus.CONTEXT_SPECIFIC: FieldRequirement(
        field="context",
        label="Context",
        placeholder="e.g., restaurant, travel, business meeting",
        validator=lambda value: bool(value.strip()),
        clause=" The context should be: {value}.",
    ),
    ContentFocus.GRAMMAR: FieldRequirement(
        field="grammar_topic",
        label="Grammar Topic",
        placeholder="Select grammar topic",
        validator=_is_member(GrammarTopic),
        clause=" Focus specifically on {value} grammar.",
        choices=GRAMMAR_TOPIC_LABELS,
    ),
    ContentFocus.LEVEL_BASED: FieldRequirement(
        field="cefr_level",
        label="CEFR Level",
        placeholder="Select your level",
        validator=_is_member(CEFRLevel),
        clause=" Adapt the vocabulary and complexity to {value} level.",
        choices=CEFR_LEVEL_LABELS,
    ),
}


def get_requirement(content_type: str) -> FieldRequirement | None:
    """Look up the extra field required by a content focus value.

    Args:
        content_type: ContentFocus value, or "" when nothing is selected.

    Returns:
        The FieldRequirement, or None when the focus needs no extra field.
    """
    try:
        focus = ContentFocus(content_type)
    except ValueError:
        return None
    return FOCUS_REQUIREMENTS.get(focus)


def missing_required_fields(parameters: RhymeParameters) -> list[str]:
    """List required fields that are not set yet.

    Args:
        parameters: Current selections.

    Returns:
        Field names in form order; empty when generation may start.
    """
    missing = []
    if not parameters.rhyme_type:
        missing.append("rhyme_type")
    if not parameters.content_type:
        missing.append("content_type")

    requirement = get_requirement(parameters.content_type)
    if requirement is not None and not requirement.is_satisfied(parameters):
        missing.append(requirement.field)
    return missing


def can_generate(parameters: RhymeParameters) -> bool:
    """Whether the selections are complete enough to generate a rhyme."""
    return not missing_required_fields(parameters)
