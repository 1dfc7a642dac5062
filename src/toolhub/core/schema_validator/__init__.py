"""
Schema Validator - Validate call arguments against a descriptor's JSON Schema

Responsibility:
- Check arguments against the parameters schema of a FunctionDescriptor
- Give clear, actionable error messages
- NO execution
- NO transformation of data

The registry and dispatcher never validate; providers opt in
(see OpenFunction.validate_arguments).
"""

from typing import Any

from jsonschema import Draft7Validator

from toolhub.core.function_definition import FunctionDescriptor


class ArgumentValidationError(Exception):
    """Arguments do not match the function's schema."""

    def __init__(self, function: str, errors: list[str]):
        self.function = function
        self.errors = errors
        super().__init__(f"Invalid arguments for '{function}': {'; '.join(errors)}")


class SchemaValidator:
    """
    JSON Schema validator for function arguments.

    Uses jsonschema Draft 7.
    """

    @staticmethod
    def iter_errors(data: Any, schema: dict) -> list[str]:
        """Return one message per violation, prefixed with its path."""
        validator = Draft7Validator(schema)
        messages = []
        for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
            path = ".".join(str(p) for p in error.path)
            messages.append(f"{path}: {error.message}" if path else error.message)
        return messages

    @classmethod
    def validate_arguments(cls, descriptor: FunctionDescriptor, arguments: dict[str, Any]) -> None:
        """
        Validate arguments against the descriptor's parameters schema.

        Raises:
            ArgumentValidationError: If validation fails
        """
        errors = cls.iter_errors(arguments, descriptor.parameters_schema())
        if errors:
            raise ArgumentValidationError(descriptor.name, errors)


__all__ = ["SchemaValidator", "ArgumentValidationError"]
