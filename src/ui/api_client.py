"""API client for communicating with the FastAPI backend."""

import logging
import os
from typing import Any

import httpx

from src.chains.rhyme_generator import RhymeResult
from src.chains.rhyme_options import RhymeParameters

logger = logging.getLogger(__name__)


class APIClient:
    """Client for the rhyme generation API."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API server. If not provided, uses API_URL env var
                     or defaults to http://localhost:8000.
            transport: Optional httpx transport (used by tests to stub the server).
        """
        self.base_url = base_url or os.environ.get("API_URL", "http://localhost:8000")
        self.timeout = 120.0  # 2 minutes for LLM operations
        self.transport = transport

    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self.transport)

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            with self._client(timeout=5.0) as client:
                response = client.get(f"{self.base_url}/health")
                return response.status_code == 200
        except httpx.RequestError:
            return False

    def get_options(self) -> dict[str, Any]:
        """Fetch option catalogs for the parameter form.

        For clients without the src.chains catalogs; the Streamlit page reads
        them in-process and does not call this on reruns.

        Returns:
            Options payload as returned by GET /options.

        Raises:
            httpx.HTTPStatusError: If the request fails.
        """
        with self._client(timeout=10.0) as client:
            response = client.get(f"{self.base_url}/options")
            response.raise_for_status()
            return response.json()

    def generate(self, parameters: RhymeParameters) -> RhymeResult:
        """Generate a rhyme.

        Args:
            parameters: Form selections.

        Returns:
            Generated rhyme with pronunciation guide and translation.

        Raises:
            httpx.HTTPStatusError: If the server answers with an error status.
            httpx.RequestError: If the server cannot be reached.
        """
        with self._client(timeout=self.timeout) as client:
            response = client.post(
                f"{self.base_url}/generate",
                json=parameters.model_dump(),
            )
            response.raise_for_status()
            return RhymeResult(**response.json())
