# =============================================================================
# record_primitives/exceptions.py - Library Exceptions
# =============================================================================
# Primitives never raise for nil or mistyped data; they default instead.
# These exceptions cover the few caller mistakes that cannot be defaulted:
# an empty path given to pick_deep and misuse of the primitive registry.
#
# Each subclass also derives from the builtin a caller would expect
# (ValueError, KeyError), so plain `except ValueError` keeps working.
# =============================================================================

from typing import Any


class PrimitiveError(Exception):
    """
    Base class for record_primitives errors.

    `code` is fixed per subclass; `details` holds the offending arguments
    so a pipeline runner can log which step failed and with what.
    """

    code = "PRIMITIVE_ERROR"
    hint: str | None = None

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        return f"{text} ({self.hint})" if self.hint else text

    def to_dict(self) -> dict[str, Any]:
        """Structured form for log records (logger.error(..., extra=err.to_dict()))."""
        return {"error_code": self.code, "error_details": self.details}


# =============================================================================
# Path Exceptions
# =============================================================================

class InvalidPathError(PrimitiveError, ValueError):
    """Raised when a path that must name a nested key is empty."""

    code = "INVALID_PATH"
    hint = "pass at least one key, e.g. ['user', 'address']"

    def __init__(self, path: Any):
        super().__init__(f"Path must contain at least one key, got {path!r}", path=repr(path))


# =============================================================================
# Registry Exceptions
# =============================================================================

class DuplicatePrimitiveError(PrimitiveError, ValueError):
    """Raised when two primitives are registered under the same name."""

    code = "DUPLICATE_PRIMITIVE"

    def __init__(self, name: str):
        super().__init__(f"Primitive '{name}' is already registered", name=name)


class PrimitiveNotFoundError(PrimitiveError, KeyError):
    """Raised by require_primitive() for a name nothing was registered under."""

    code = "PRIMITIVE_NOT_FOUND"
    hint = "list_primitives() shows the registered names"

    def __init__(self, name: str, available: list[str] | None = None):
        super().__init__(f"Unknown primitive: {name}", name=name, available=available or [])

    # KeyError.__str__ would repr() the message
    __str__ = PrimitiveError.__str__
