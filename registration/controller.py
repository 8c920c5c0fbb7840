import logging
from typing import Any, Dict, Optional

from config.settings import FormSettings
from registration.graph import RegistrationGraphFactory
from registration.state import (
    FieldName,
    FieldState,
    FormState,
    FormStatus,
    SubmissionState,
)
from registration.submitter import Submitter
from registration.validator import RegistrationValidator, ValidationProfile

logger = logging.getLogger(__name__)


class RegistrationFormController:
    """
    Holds the values and per-field state of one registration form and drives
    its submit lifecycle (idle -> submitting -> idle).

    Errors are recorded as soon as a value changes, but are only exposed
    through visible_error() once the field has been touched.
    """

    def __init__(self, validator: RegistrationValidator, graph: Any):
        self.validator = validator
        self.graph = graph
        self.state = FormState()

    @classmethod
    def from_settings(
        cls, settings: FormSettings, submitter: Submitter
    ) -> "RegistrationFormController":
        validator = RegistrationValidator(ValidationProfile(settings.profile))
        graph = RegistrationGraphFactory(
            validator, submitter, redact_password=settings.redact_password
        ).compile()
        return cls(validator, graph)

    def field_state(self, field: FieldName) -> FieldState:
        return self.state.fields[FieldName(field)]

    def set_field_value(self, field: FieldName, raw_value: str) -> None:
        field = FieldName(field)
        setattr(self.state.values, field.value, raw_value)
        self.state.fields[field].error = self.validator.message_for(field, raw_value)

    def touch_field(self, field: FieldName) -> None:
        field = FieldName(field)
        fs = self.state.fields[field]
        fs.touched = True
        fs.error = self.validator.message_for(field, self.state.values.get(field))

    def visible_error(self, field: FieldName) -> Optional[str]:
        fs = self.field_state(field)
        return fs.error if fs.touched else None

    def visible_errors(self) -> Dict[str, str]:
        return {
            field.value: fs.error
            for field, fs in self.state.fields.items()
            if fs.touched and fs.error is not None
        }

    def compute_is_valid(self) -> bool:
        return self.validator.is_valid(self.state.values)

    @property
    def is_submitting(self) -> bool:
        return self.state.status == FormStatus.SUBMITTING

    @property
    def can_submit(self) -> bool:
        return self.compute_is_valid() and self.state.status == FormStatus.IDLE

    async def submit(self) -> Optional[SubmissionState]:
        """
        Run the submit pipeline once. Returns None without touching the
        collaborator when the form is invalid or already submitting.
        """
        if not self.can_submit:
            logger.debug("Submit ignored (status=%s)", self.state.status.value)
            return None

        self.state.status = FormStatus.SUBMITTING
        self.state.last_outcome = None
        self.state.last_submit_error = None
        logger.info("Registration submit started")
        try:
            result = await self.graph.ainvoke(
                {"values": self.state.values.model_dump()}
            )
            final = self._as_submission(result)
            self.state.last_outcome = final.outcome
            self.state.last_submit_error = final.submit_error
            return final
        finally:
            self.state.status = FormStatus.IDLE
            logger.info("Registration submit finished (outcome=%s)", self.state.last_outcome)

    @staticmethod
    def _as_submission(result: Any) -> SubmissionState:
        if isinstance(result, SubmissionState):
            return result
        return SubmissionState.model_validate(dict(result))
