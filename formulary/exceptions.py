"""Exception classes raised by formulary.

Evaluation errors derive from ValueError so callers that already guard
numeric code with ``except ValueError`` keep working.
"""

from typing import Union


class FormularyError(Exception):
    """Base for all formulary errors."""
    pass


class UnboundVariableError(FormularyError, ValueError):
    """Raised when a variable without a value is evaluated."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable '{name}' was not initialized.")


class UnsupportedFunctionError(FormularyError, ValueError):
    """Raised for a function name or id that has no evaluation rule."""

    def __init__(self, function: Union[str, int]):
        self.function = function
        super().__init__(f"Unsupported function: {function!r}")
