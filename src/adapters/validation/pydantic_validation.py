"""
Pydantic validation adapter - Implements the Validation protocol.

Validates raw request bodies against a pydantic model and reports the
first failure as a presentation error instead of raising.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from src.presentation.errors import InvalidParamError, MissingParamError


class PydanticValidation:
    """
    Validate request bodies with a pydantic model.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Error field names are reported by alias (the wire name).
    """

    def __init__(self, model: type[BaseModel]) -> None:
        self._model = model

    def validate(self, body: Any) -> Exception | None:
        if not isinstance(body, Mapping):
            return MissingParamError(self._first_required_field())

        try:
            self._model.model_validate(body)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or self._first_required_field()
            if first["type"] == "missing":
                return MissingParamError(field)
            return InvalidParamError(field)
        return None

    def _first_required_field(self) -> str:
        for name, field in self._model.model_fields.items():
            if field.is_required():
                return field.alias or name
        return "body"
