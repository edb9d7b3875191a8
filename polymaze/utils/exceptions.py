"""
Exception classes for polymaze with helpful error messages and user guidance.

Every error raised while validating a maze request derives from
``PolyMazeError`` and carries the component that rejected it, a suggested
fix and a short diagnostic block. Two parameter-level kinds exist:

- ``ConfigError``: the request asks for something the generator cannot do
  (unknown method, depth outside the shape's domain, bad unit length)
- ``ValidationError``: an explicit argument names something that does not
  exist (side index outside ``[1, side_count]``, impossible hole count)

``InvalidArgumentError`` is both at once and is used where a value is
simultaneously a configuration and an argument problem, such as a boundary
flag array whose length does not match the polygon.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, ClassVar


class PolyMazeError(Exception):
    """
    Base exception for polymaze errors with helpful context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component_name: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component_name = component_name or "polymaze"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component_name}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class _ParameterError(PolyMazeError):
    """Shared constructor for errors about a single named parameter."""

    default_error_code: ClassVar[str] = "INVALID_PARAMETER"
    message_prefix: ClassVar[str] = "Invalid value"

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        *,
        valid_range: tuple | None = None,
        valid_options: list[str] | tuple[str, ...] | None = None,
        reason: str | None = None,
        component_name: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        diagnostic_data: dict[str, Any] = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if valid_range is not None:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        if valid_options:
            diagnostic_data["valid_options"] = ", ".join(str(option) for option in valid_options)

        suggested_action = _generate_parameter_suggestions(parameter_name, provided_value, valid_range, valid_options)

        message = f"{self.message_prefix} for parameter '{parameter_name}'"
        if reason:
            message += f": {reason}"

        super().__init__(
            message=message,
            component_name=component_name,
            suggested_action=suggested_action,
            error_code=self.default_error_code,
            diagnostic_data=diagnostic_data,
        )


class ConfigError(_ParameterError):
    """Exception raised when a maze request is configured in an unsupported way."""

    default_error_code = "INVALID_CONFIGURATION"
    message_prefix = "Invalid configuration"


class ValidationError(_ParameterError):
    """Exception raised when an explicit argument is outside its admissible range."""

    default_error_code = "INVALID_ARGUMENT"
    message_prefix = "Invalid argument"


class InvalidArgumentError(ConfigError, ValidationError):
    """Raised for values that are both misconfigured and invalid as arguments."""

    default_error_code = "INVALID_ARGUMENT"
    message_prefix = "Invalid argument"


def _generate_parameter_suggestions(
    parameter_name: str,
    provided_value: Any,
    valid_range: tuple | None,
    valid_options: list[str] | tuple[str, ...] | None,
) -> str:
    """Generate specific suggestions for parameter errors."""

    suggestions = []

    if valid_options:
        suggestions.append(f"Choose {parameter_name} from: {', '.join(str(option) for option in valid_options)}")

    if valid_range is not None and isinstance(provided_value, (int, float)) and not isinstance(provided_value, bool):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if "depth" in parameter_name.lower() and isinstance(provided_value, (int, float)):
        if provided_value > 8:
            suggestions.append("Deep mazes grow as 4^depth cells; consider a smaller depth")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


def validate_parameter_value(
    value: Any,
    parameter_name: str,
    valid_range: tuple | None = None,
    component_name: str | None = None,
    exclusive_lower: bool = False,
):
    """Validate that a numeric parameter is finite and inside ``valid_range``."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigError(
            parameter_name=parameter_name,
            provided_value=value,
            valid_range=valid_range,
            reason="expected a real number",
            component_name=component_name,
        )

    if not math.isfinite(value):
        raise ConfigError(
            parameter_name=parameter_name,
            provided_value=value,
            valid_range=valid_range,
            reason="expected a finite number",
            component_name=component_name,
        )

    if valid_range is not None:
        low, high = valid_range
        below = value <= low if exclusive_lower else value < low
        if below or value > high:
            raise ConfigError(
                parameter_name=parameter_name,
                provided_value=value,
                valid_range=valid_range,
                component_name=component_name,
            )
