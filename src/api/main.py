"""FastAPI application for the rhyme generation API."""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from src.api.models import (
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    OptionItem,
    OptionsResponse,
)
from src.chains.rhyme_generator import RhymeGeneratorChain
from src.chains.rhyme_options import (
    CEFR_LEVEL_LABELS,
    CONTENT_FOCUS_LABELS,
    FLAVOUR_LABELS,
    FOCUS_REQUIREMENTS,
    GRAMMAR_TOPIC_LABELS,
    RHYME_TYPE_LABELS,
    missing_required_fields,
)

# Configure logging for Cloud Run
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global instance (initialized on startup)
rhyme_generator: RhymeGeneratorChain | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and cleanup resources."""
    global rhyme_generator

    logger.info("Initializing API resources...")
    rhyme_generator = RhymeGeneratorChain()

    yield

    logger.info("Cleaning up API resources...")


app = FastAPI(
    title="Polyglot Rhyme Generator API",
    description="English rhymes with Chilean pronunciation guides for language learners",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _to_items(labels: dict) -> list[OptionItem]:
    return [OptionItem(value=option.value, label=label) for option, label in labels.items()]


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/options", response_model=OptionsResponse)
async def get_options() -> OptionsResponse:
    """Return the option catalogs and conditional field rules for the form."""
    return OptionsResponse(
        rhyme_types=_to_items(RHYME_TYPE_LABELS),
        content_types=_to_items(CONTENT_FOCUS_LABELS),
        grammar_topics=_to_items(GRAMMAR_TOPIC_LABELS),
        cefr_levels=_to_items(CEFR_LEVEL_LABELS),
        flavours=_to_items(FLAVOUR_LABELS),
        required_fields={
            focus.value: requirement.field for focus, requirement in FOCUS_REQUIREMENTS.items()
        },
    )


@app.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_rhyme(body: GenerateRequest) -> GenerateResponse:
    """Generate a rhyme with pronunciation guide and translation.

    Args:
        body: Generation request with the six form selections.

    Returns:
        Rhyme, Chilean pronunciation guide and Spanish translation.

    Raises:
        HTTPException: 400 if required selections are missing,
            500 if the generator is unavailable or the model call fails.
    """
    missing = missing_required_fields(body)
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Missing required fields: {', '.join(missing)}",
        )

    if rhyme_generator is None:
        raise HTTPException(status_code=500, detail="Rhyme generator not initialized")

    try:
        result = await rhyme_generator.agenerate(body.to_parameters())
    except Exception as e:
        logger.exception("Error generating rhyme")
        raise HTTPException(status_code=500, detail=str(e)) from e

    return GenerateResponse(**result.model_dump())
