"""
Unit tests for PydanticValidation with the API request models.
"""

import pytest

from src.adapters.validation import PydanticValidation
from src.api.models import LoginRequest, SignUpRequest
from src.presentation.errors import InvalidParamError, MissingParamError


def make_signup_body(**overrides: str) -> dict:
    body = {
        "name": "any_name",
        "email": "any_email@mail.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }
    body.update(overrides)
    return body


@pytest.fixture
def signup_validation() -> PydanticValidation:
    return PydanticValidation(SignUpRequest)


class TestSignUpValidation:
    def test_valid_body_returns_none(self, signup_validation: PydanticValidation) -> None:
        assert signup_validation.validate(make_signup_body()) is None

    @pytest.mark.parametrize("field", ["name", "email", "password", "passwordConfirmation"])
    def test_missing_field(self, signup_validation: PydanticValidation, field: str) -> None:
        body = make_signup_body()
        del body[field]

        error = signup_validation.validate(body)

        assert isinstance(error, MissingParamError)
        assert error.param_name == field
        assert str(error) == f"Missing param: {field}"

    def test_invalid_email(self, signup_validation: PydanticValidation) -> None:
        error = signup_validation.validate(make_signup_body(email="invalid-email"))

        assert isinstance(error, InvalidParamError)
        assert error.param_name == "email"

    def test_short_password(self, signup_validation: PydanticValidation) -> None:
        error = signup_validation.validate(
            make_signup_body(password="short", passwordConfirmation="short")
        )

        assert isinstance(error, InvalidParamError)
        assert error.param_name == "password"

    def test_confirmation_mismatch(self, signup_validation: PydanticValidation) -> None:
        error = signup_validation.validate(make_signup_body(passwordConfirmation="other_password"))

        assert isinstance(error, InvalidParamError)
        assert error.param_name == "passwordConfirmation"

    @pytest.mark.parametrize("body", [None, [], "text"])
    def test_non_object_body(self, signup_validation: PydanticValidation, body: object) -> None:
        error = signup_validation.validate(body)

        assert isinstance(error, MissingParamError)
        assert error.param_name == "name"


class TestLoginValidation:
    def test_valid_body_returns_none(self) -> None:
        validation = PydanticValidation(LoginRequest)

        assert validation.validate({"email": "any_email@mail.com", "password": "x"}) is None

    def test_missing_password(self) -> None:
        validation = PydanticValidation(LoginRequest)

        error = validation.validate({"email": "any_email@mail.com"})

        assert isinstance(error, MissingParamError)
        assert error.param_name == "password"
