"""
Structured field errors
"""

import enum
import json
from typing import Any


class ErrorType(enum.Enum):
    """Kind of a field error, rendered the way the Kubernetes API does"""

    NOT_SUPPORTED = "Unsupported value"
    INVALID = "Invalid value"
    REQUIRED = "Required value"

    def __str__(self) -> str:
        return self.value


class FieldError(ValueError):
    """A single invalid field: what kind of failure, where, with which value and why"""

    def __init__(self, type: ErrorType, field: str, bad_value: Any, detail: str = ""):
        self.type = type
        self.field = field
        self.bad_value = bad_value
        self.detail = detail
        super().__init__(self.error_body())

    def error_body(self) -> str:
        if self.type is ErrorType.REQUIRED:
            body = str(self.type)
        else:
            body = f"{self.type}: {_format_value(self.bad_value)}"
        if self.detail:
            body += f": {self.detail}"
        return body

    def __str__(self) -> str:
        return f"{self.field}: {self.error_body()}"

    def __repr__(self) -> str:
        return (
            f"FieldError(type={self.type.name}, field={self.field!r}, "
            f"bad_value={self.bad_value!r}, detail={self.detail!r})"
        )


def _format_value(value: Any) -> str:
    # strings are quoted, numbers and booleans printed bare
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, (bool, int, float)):
        return str(value)
    return repr(value)
