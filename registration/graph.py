import logging
from typing import Any, Dict, Literal

from langgraph.graph import StateGraph, START, END

from registration.errors import SubmitError
from registration.state import SubmissionPayload, SubmissionState, SubmitOutcome
from registration.submitter import Submitter
from registration.validator import RegistrationValidator

logger = logging.getLogger(__name__)


class RegistrationGraphFactory:
    def __init__(
        self,
        validator: RegistrationValidator,
        submitter: Submitter,
        redact_password: bool = True,
    ):
        self.validator = validator
        self.submitter = submitter
        self.redact_password = redact_password

    def validate_node(self, state: SubmissionState) -> Dict[str, Any]:
        errors = self.validator.validate_all(state.values)
        if errors:
            logger.warning("Submit rejected, invalid fields: %s", sorted(errors))
            return {"errors": errors, "outcome": SubmitOutcome.REJECTED}
        return {"errors": {}}

    @staticmethod
    def should_submit(state: SubmissionState) -> Literal["submit", "end"]:
        return "submit" if len(state.errors) == 0 else "end"

    async def submit_node(self, state: SubmissionState) -> Dict[str, Any]:
        """
        Hand the payload to the collaborator. A SubmitError becomes a failed
        outcome instead of escaping the graph.
        """
        payload = SubmissionPayload.from_values(state.values, self.redact_password)

        try:
            await self.submitter.submit(payload)
        except SubmitError as exc:
            logger.warning("Submit failed (%s): %s", exc.kind.value, exc.message)
            return {"outcome": SubmitOutcome.FAILED, "submit_error": exc.message}

        return {"outcome": SubmitOutcome.SUCCEEDED, "submit_error": None}

    def build(self) -> StateGraph:
        g = StateGraph(SubmissionState)

        g.add_node("validate", self.validate_node)
        g.add_node("submit", self.submit_node)

        g.add_edge(START, "validate")

        g.add_conditional_edges(
            "validate",
            self.should_submit,
            {"end": END, "submit": "submit"},
        )
        g.add_edge("submit", END)

        return g

    def compile(self, checkpointer: Any = None):
        return self.build().compile(checkpointer=checkpointer)
