import re
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from pydantic import EmailStr, TypeAdapter, ValidationError

from registration.errors import FieldValidationError
from registration.state import FieldName, FormValues


NAME_PATTERN = re.compile(r"^[a-zA-ZÀ-ÿ\s']+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*#?&])[A-Za-z0-9@$!%*#?&]{8,}$"
)
ACCENT_PATTERN = re.compile(r"[çáàãâéêíóôõúü]", re.IGNORECASE)
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


class ValidationProfile(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


class FieldRule(NamedTuple):
    predicate: Callable[[str], bool]
    message: str


def digits(value: str) -> str:
    return NON_DIGIT_PATTERN.sub("", value)


def required(message: str) -> FieldRule:
    # whitespace counts as a value; only the empty string is missing
    return FieldRule(lambda v: v != "", message)


def digit_count(low: int, high: int, message: str) -> FieldRule:
    return FieldRule(lambda v: low <= len(digits(v)) <= high, message)


def raw_length(low: int, high: Optional[int], message: str) -> FieldRule:
    # high=None means no upper bound
    return FieldRule(
        lambda v: len(v) >= low and (high is None or len(v) <= high), message
    )


def matches(pattern: "re.Pattern[str]", message: str) -> FieldRule:
    return FieldRule(lambda v: pattern.fullmatch(v) is not None, message)


_email_adapter = TypeAdapter(EmailStr)


def is_email(value: str) -> bool:
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


EMAIL_RULES: Tuple[FieldRule, ...] = (
    required("Informe o e-mail"),
    FieldRule(is_email, "E-mail inválido"),
    matches(EMAIL_PATTERN, "E-mail inválido"),
)

PASSWORD_RULES: Tuple[FieldRule, ...] = (
    required("Informe a senha"),
    FieldRule(lambda v: len(v) >= 8, "A senha deve ter no mínimo 8 caracteres"),
    matches(
        PASSWORD_PATTERN,
        "A senha deve conter letra minúscula, maiúscula, número e caractere "
        "especial. Sem acentos ou ç.",
    ),
    FieldRule(
        lambda v: ACCENT_PATTERN.search(v) is None,
        'A senha não pode conter acentos ou "ç"',
    ),
)

RuleTable = Dict[FieldName, Tuple[FieldRule, ...]]

RULES: Dict[ValidationProfile, RuleTable] = {
    ValidationProfile.STRICT: {
        FieldName.NAME: (
            required("Informe seu nome completo"),
            matches(NAME_PATTERN, "Nome deve conter apenas letras"),
        ),
        FieldName.POSTAL_CODE: (
            required("Informe o CEP"),
            digit_count(8, 8, "CEP inválido"),
        ),
        FieldName.TAX_ID: (
            required("Informe o CPF"),
            digit_count(11, 11, "CPF inválido"),
        ),
        FieldName.PHONE: (
            required("Informe o telefone"),
            digit_count(10, 11, "Telefone inválido"),
        ),
        FieldName.EMAIL: EMAIL_RULES,
        FieldName.PASSWORD: PASSWORD_RULES,
    },
    # Checks the masked string as typed, so it depends on the exact mask.
    ValidationProfile.LENIENT: {
        FieldName.NAME: (required("Informe seu nome completo"),),
        FieldName.POSTAL_CODE: (
            required("Informe o CEP"),
            raw_length(9, 9, "CEP inválido"),
        ),
        FieldName.TAX_ID: (
            required("Informe o CPF"),
            raw_length(14, 14, "CPF inválido"),
        ),
        FieldName.PHONE: (
            required("Informe o telefone"),
            raw_length(14, None, "Telefone inválido"),
        ),
        FieldName.EMAIL: EMAIL_RULES,
        FieldName.PASSWORD: PASSWORD_RULES,
    },
}


class RegistrationValidator:
    def __init__(self, profile: ValidationProfile = ValidationProfile.STRICT):
        self.profile = ValidationProfile(profile)
        self.rules = RULES[self.profile]

    def check(self, field: FieldName, value: str) -> None:
        """
        Raise FieldValidationError with the first failing rule's message.
        """
        field = FieldName(field)
        for rule in self.rules[field]:
            if not rule.predicate(value):
                raise FieldValidationError(field.value, rule.message)

    def message_for(self, field: FieldName, value: str) -> Optional[str]:
        try:
            self.check(field, value)
        except FieldValidationError as exc:
            return exc.message
        return None

    def validate_all(self, values: FormValues) -> Dict[str, str]:
        errors: Dict[str, str] = {}

        for field in FieldName:
            message = self.message_for(field, values.get(field))
            if message is not None:
                errors[field.value] = message

        return errors

    def is_valid(self, values: FormValues) -> bool:
        return all(self.message_for(field, values.get(field)) is None for field in FieldName)
