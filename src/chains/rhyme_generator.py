"""Rhyme generation chain: prompt assembly, LLM call and section parsing."""

import logging
import re

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from pydantic import BaseModel, Field

from src.chains.rhyme_options import RhymeParameters, get_requirement, humanize
from src.llm import get_llm

logger = logging.getLogger(__name__)

ENGLISH_RHYME_HEADER = "ENGLISH RHYME:"
CHILEAN_PRONUNCIATION_HEADER = "CHILEAN PRONUNCIATION:"
SPANISH_TRANSLATION_HEADER = "SPANISH TRANSLATION:"

SECTION_HEADERS = (
    ENGLISH_RHYME_HEADER,
    CHILEAN_PRONUNCIATION_HEADER,
    SPANISH_TRANSLATION_HEADER,
)

SECTION_HEADER_PATTERN = re.compile(
    "|".join(re.escape(header) for header in SECTION_HEADERS),
    re.IGNORECASE,
)

PRONUNCIATION_PLACEHOLDER = "Pronunciation guide will be generated in the next version."
TRANSLATION_PLACEHOLDER = "Spanish translation will be generated in the next version."

OUTPUT_FORMAT_INSTRUCTIONS = """

Please provide the output in exactly this format:

ENGLISH RHYME:
[The rhyme in English following the {rhyme_type} structure]

CHILEAN PRONUNCIATION:
[The same rhyme written phonetically for Chilean Spanish speakers to pronounce correctly, using Spanish phonetic approximations]

SPANISH TRANSLATION:
[A natural Spanish translation that maintains the meaning and educational value]"""


class RhymeResult(BaseModel):
    """Generated rhyme split into its three sections."""

    english_rhyme: str = Field(description="Rhyme in English")
    chilean_pronunciation: str = Field(
        description="Rhyme spelled phonetically for Chilean Spanish speakers"
    )
    spanish_translation: str = Field(description="Spanish translation")


def build_rhyme_prompt(parameters: RhymeParameters) -> str:
    """Build the generation prompt from the user's selections.

    Args:
        parameters: Current selections. Fields belonging to a content focus
            other than the selected one are ignored.

    Returns:
        Prompt text ending with the three-section output format directive.
    """
    prompt = (
        f"Generate a {parameters.rhyme_type} in English for language learners "
        f"focusing on {humanize(parameters.content_type)}."
    )

    if parameters.flavour:
        prompt += f" The tone and style should be {parameters.flavour}."

    requirement = get_requirement(parameters.content_type)
    if requirement is not None:
        prompt += requirement.prompt_clause(parameters)

    prompt += OUTPUT_FORMAT_INSTRUCTIONS.format(rhyme_type=parameters.rhyme_type)
    return prompt


def parse_rhyme_output(text: str) -> RhymeResult:
    """Split model output into rhyme, pronunciation guide and translation.

    The first three header matches delimit the sections in order; any later
    header occurrence stays inside the translation. Fewer than three headers
    falls back to the raw text as the rhyme with placeholder guide and
    translation.

    Args:
        text: Raw model output.

    Returns:
        RhymeResult with trimmed sections, or the fallback result.
    """
    # First piece is whatever preceded the first header
    pieces = SECTION_HEADER_PATTERN.split(text, maxsplit=len(SECTION_HEADERS))

    if len(pieces) > len(SECTION_HEADERS):
        _, english, pronunciation, translation = pieces
        return RhymeResult(
            english_rhyme=english.strip(),
            chilean_pronunciation=pronunciation.strip(),
            spanish_translation=translation.strip(),
        )

    logger.warning(f"Unexpected rhyme output format, found {len(pieces) - 1} section headers")
    return RhymeResult(
        english_rhyme=text,
        chilean_pronunciation=PRONUNCIATION_PLACEHOLDER,
        spanish_translation=TRANSLATION_PLACEHOLDER,
    )


class RhymeGeneratorChain:
    """Chain that turns rhyme parameters into a parsed RhymeResult."""

    def __init__(self, llm: BaseChatModel | None = None):
        """Initialize the rhyme generator chain.

        Args:
            llm: Optional chat model. Creates the lite Vertex AI model if not provided.
        """
        self.llm = llm or get_llm(quality="lite")
        self.chain = self.llm | StrOutputParser()

    def generate(self, parameters: RhymeParameters) -> RhymeResult:
        """Generate a rhyme.

        Args:
            parameters: User selections.

        Returns:
            Parsed RhymeResult.
        """
        prompt = build_rhyme_prompt(parameters)
        logger.info(
            f"Generating {parameters.rhyme_type} for focus {parameters.content_type}"
        )
        text = self.chain.invoke(prompt)
        return parse_rhyme_output(text)

    async def agenerate(self, parameters: RhymeParameters) -> RhymeResult:
        """Async version of generate."""
        prompt = build_rhyme_prompt(parameters)
        logger.info(
            f"Generating {parameters.rhyme_type} for focus {parameters.content_type}"
        )
        text = await self.chain.ainvoke(prompt)
        return parse_rhyme_output(text)
