import asyncio
import logging
from typing import List, Protocol

from registration.state import SubmissionPayload

logger = logging.getLogger(__name__)


class Submitter(Protocol):
    async def submit(self, payload: SubmissionPayload) -> None:
        """Deliver the payload or raise SubmitError."""
        ...


class MockSubmitter:
    """
    Stand-in for the registration backend: waits like a round trip would and
    always succeeds.
    """

    def __init__(self, delay_seconds: float = 1.5):
        self.delay_seconds = delay_seconds
        self.received: List[SubmissionPayload] = []

    async def submit(self, payload: SubmissionPayload) -> None:
        # SecretStr renders as '**********' if the password is present
        logger.info("Submitting registration: %s", payload.model_dump(exclude_none=True))
        await asyncio.sleep(self.delay_seconds)
        self.received.append(payload)
        logger.info("Registration submitted successfully")
