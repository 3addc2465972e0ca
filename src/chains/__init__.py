"""LangChain chains for rhyme generation."""

from src.chains.rhyme_generator import RhymeGeneratorChain, RhymeResult
from src.chains.rhyme_options import RhymeParameters

__all__ = [
    "RhymeGeneratorChain",
    "RhymeParameters",
    "RhymeResult",
]
