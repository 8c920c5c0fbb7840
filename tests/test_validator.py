# tests/test_validator.py

import pytest

from registration.errors import FieldValidationError
from registration.state import FieldName, FormValues
from registration.validator import RegistrationValidator, ValidationProfile


VALID = FormValues(
    name="João D'Ávila",
    postal_code="01310-100",
    tax_id="123.456.789-01",
    phone="(11) 98765-4321",
    email="joao@exemplo.com.br",
    password="Abcdefg1!",
)

strict = RegistrationValidator(ValidationProfile.STRICT)
lenient = RegistrationValidator(ValidationProfile.LENIENT)


def test_valid_values_pass_both_profiles():
    assert strict.validate_all(VALID) == {}
    assert lenient.validate_all(VALID) == {}
    assert strict.is_valid(VALID)
    assert lenient.is_valid(VALID)


def test_empty_form_reports_required_messages():
    errors = strict.validate_all(FormValues())

    assert errors == {
        "name": "Informe seu nome completo",
        "postal_code": "Informe o CEP",
        "tax_id": "Informe o CPF",
        "phone": "Informe o telefone",
        "email": "Informe o e-mail",
        "password": "Informe a senha",
    }
    assert not strict.is_valid(FormValues())


def test_required_only_rejects_empty_string():
    assert strict.message_for(FieldName.NAME, "") == "Informe seu nome completo"
    assert strict.message_for(FieldName.NAME, "   ") is None
    assert lenient.message_for(FieldName.NAME, "   ") is None
    assert strict.message_for(FieldName.EMAIL, "   ") == "E-mail inválido"


@pytest.mark.parametrize("password", ["abcdefg1", "Abcdefg1", "Abcdéfg1!", "Abcdefç1!"])
def test_password_rejected(password):
    assert strict.message_for(FieldName.PASSWORD, password) is not None
    assert lenient.message_for(FieldName.PASSWORD, password) is not None


def test_password_accepted():
    assert strict.message_for(FieldName.PASSWORD, "Abcdefg1!") is None


def test_short_password_reports_min_length_first():
    msg = strict.message_for(FieldName.PASSWORD, "Ab1!")
    assert msg == "A senha deve ter no mínimo 8 caracteres"


def test_strict_postal_code_counts_digits():
    assert strict.message_for(FieldName.POSTAL_CODE, "01310-100") is None
    assert strict.message_for(FieldName.POSTAL_CODE, "01310100") is None
    assert strict.message_for(FieldName.POSTAL_CODE, "1310-10") == "CEP inválido"


def test_strict_tax_id_ignores_punctuation():
    assert strict.message_for(FieldName.TAX_ID, "12345678901") is None
    assert strict.message_for(FieldName.TAX_ID, "1.2.3.4.5.6.7.8.9-0-1") is None
    assert strict.message_for(FieldName.TAX_ID, "123.456.789-0") == "CPF inválido"
    assert strict.message_for(FieldName.TAX_ID, "123.456.789-012") == "CPF inválido"


def test_strict_phone_accepts_ten_or_eleven_digits():
    assert strict.message_for(FieldName.PHONE, "(11) 3456-7890") is None
    assert strict.message_for(FieldName.PHONE, "(11) 98765-4321") is None
    assert strict.message_for(FieldName.PHONE, "(11) 8765-432") == "Telefone inválido"
    assert strict.message_for(FieldName.PHONE, "119876543210") == "Telefone inválido"


def test_strict_name_letters_only():
    assert strict.message_for(FieldName.NAME, "Ana Lúcia") is None
    assert strict.message_for(FieldName.NAME, "Ana 2") == "Nome deve conter apenas letras"
    assert lenient.message_for(FieldName.NAME, "Ana 2") is None


def test_lenient_checks_masked_length():
    assert lenient.message_for(FieldName.POSTAL_CODE, "01310-100") is None
    assert lenient.message_for(FieldName.POSTAL_CODE, "01310100") == "CEP inválido"

    assert lenient.message_for(FieldName.TAX_ID, "123.456.789-01") is None
    assert lenient.message_for(FieldName.TAX_ID, "12345678901") == "CPF inválido"

    assert lenient.message_for(FieldName.PHONE, "(11) 3456-7890") is None
    assert lenient.message_for(FieldName.PHONE, "11987654321") == "Telefone inválido"


@pytest.mark.parametrize("email", ["a@b", "a b@c.com", "@c.com", "abc.com"])
def test_email_shape_rejected(email):
    assert strict.message_for(FieldName.EMAIL, email) == "E-mail inválido"


def test_check_raises_field_validation_error():
    with pytest.raises(FieldValidationError) as info:
        strict.check(FieldName.POSTAL_CODE, "123")

    assert info.value.field == "postal_code"
    assert info.value.message == "CEP inválido"


def test_is_valid_matches_every_rule_passing():
    broken = VALID.model_copy(update={"phone": "(11) 1234"})

    assert not strict.is_valid(broken)
    assert list(strict.validate_all(broken)) == ["phone"]


@pytest.mark.parametrize("validator", [strict, lenient])
@pytest.mark.parametrize(
    "field, value",
    [
        (FieldName.EMAIL, "ana@exemplo.com\n"),
        (FieldName.PASSWORD, "Abcdefg1!\n"),
        (FieldName.EMAIL, "ana..silva@exemplo.com"),
        (FieldName.EMAIL, ".ana@exemplo.com"),
        (FieldName.EMAIL, "ana.@exemplo.com"),
    ],
)
def test_malformed_values_rejected_by_both_profiles(validator, field, value):
    assert validator.message_for(field, value) is not None
