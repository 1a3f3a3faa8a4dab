"""Validation adapters - Request body validation."""

from .pydantic_validation import PydanticValidation

__all__ = ["PydanticValidation"]
