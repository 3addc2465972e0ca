"""Form controller driving one rhyme generation per action."""

import logging
from typing import Any, Protocol

from src.chains.rhyme_generator import RhymeResult
from src.chains.rhyme_options import RhymeParameters
from src.ui.state import RhymeFormState

logger = logging.getLogger(__name__)


class RhymeGenerator(Protocol):
    """Anything that can turn selections into a RhymeResult."""

    def generate(self, parameters: RhymeParameters) -> RhymeResult: ...


class RhymeGeneratorController:
    """Owns the form state of one interactive session.

    Idle -> Generating -> Idle. A failed call keeps the previous result.
    """

    def __init__(
        self,
        generator: RhymeGenerator,
        user: Any = None,
        state: RhymeFormState | None = None,
    ):
        """Initialize the controller.

        Args:
            generator: Generation capability (APIClient or RhymeGeneratorChain).
            user: User identity supplied by the hosting application. Not used.
            state: Existing form state, e.g. restored from st.session_state.
        """
        self.generator = generator
        self.user = user
        self.state = state or RhymeFormState()

    def generate(self) -> bool:
        """Run one generation for the current selections.

        Returns:
            True if a new result was stored, False if the action was not
            allowed or the call failed.
        """
        if not self.state.can_generate:
            logger.debug(
                f"Generate ignored: missing={self.state.missing_fields}, "
                f"busy={self.state.is_generating}"
            )
            return False

        parameters = self.state.to_parameters()
        self.state.is_generating = True
        try:
            self.state.result = self.generator.generate(parameters)
            self.state.result_parameters = parameters
            return True
        except Exception:
            logger.exception("Error generating rhyme")
            return False
        finally:
            self.state.is_generating = False

    def reset(self) -> bool:
        """Clear selections and result. Refused while a call is in flight."""
        if self.state.is_generating:
            return False
        self.state.reset()
        return True
