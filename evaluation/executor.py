"""Verifier executor for evaluation."""

import logging
from typing import Any

from src.config.settings import Settings, get_settings
from src.services.verification.models import Evidence
from src.services.verification.verifier import CoachVerifier

logger = logging.getLogger(__name__)


class Executor:
    """Runs the coach verifier over evaluation cases."""

    def __init__(self, offline: bool = False) -> None:
        settings = get_settings()
        if offline:
            settings = settings.model_copy(update={"openai_api_key": None})
        self.settings: Settings = settings
        self._verifier: CoachVerifier | None = None

    async def __aenter__(self) -> "Executor":
        self._verifier = CoachVerifier(self.settings)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._verifier:
            await self._verifier.close()

    async def run_verification(self, evidence: Evidence) -> dict[str, Any]:
        """Run the verifier and return its response payload."""
        if not self._verifier:
            return {"error": "Executor not initialized"}

        result = await self._verifier.verify(evidence)
        return result.to_dict()
