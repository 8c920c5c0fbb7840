from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field, SecretStr


class FieldName(str, Enum):
    NAME = "name"
    POSTAL_CODE = "postal_code"
    TAX_ID = "tax_id"
    PHONE = "phone"
    EMAIL = "email"
    PASSWORD = "password"


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class SubmitOutcome(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REJECTED = "rejected"


class FormValues(BaseModel):
    name: str = Field(default="", description="Full name")
    postal_code: str = Field(default="", description="CEP, masked NNNNN-NNN")
    tax_id: str = Field(default="", description="CPF, masked NNN.NNN.NNN-NN")
    phone: str = Field(default="", description="Cell phone with area code")
    email: str = Field(default="", description="E-mail address")
    password: str = Field(default="", description="Account password")

    def get(self, field: FieldName) -> str:
        return getattr(self, field.value)


class FieldState(BaseModel):
    touched: bool = False
    error: Optional[str] = None


def _empty_fields() -> Dict[FieldName, FieldState]:
    return {field: FieldState() for field in FieldName}


class FormState(BaseModel):
    values: FormValues = Field(default_factory=FormValues)
    fields: Dict[FieldName, FieldState] = Field(default_factory=_empty_fields)
    status: FormStatus = FormStatus.IDLE

    last_outcome: Optional[SubmitOutcome] = None
    last_submit_error: Optional[str] = None


class SubmissionState(BaseModel):
    values: FormValues = Field(default_factory=FormValues)
    errors: Dict[str, str] = Field(default_factory=dict)
    outcome: Optional[SubmitOutcome] = None
    submit_error: Optional[str] = None


class SubmissionPayload(BaseModel):
    """
    What the submit collaborator receives. The password is either left out
    or wrapped so it never renders in logs.
    """

    name: str
    postal_code: str
    tax_id: str
    phone: str
    email: str
    password: Optional[SecretStr] = None

    @classmethod
    def from_values(cls, values: FormValues, redact_password: bool) -> "SubmissionPayload":
        data = values.model_dump(exclude={"password"})
        if not redact_password:
            data["password"] = SecretStr(values.password)
        return cls(**data)
