"""Custom exceptions for prompt composition.

This module defines the exception hierarchy for prompt-related errors,
providing structured error handling with machine-readable error codes.
"""

from typing import Optional


class PromptError(Exception):
    """Base exception for all prompt-related errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
    """

    def __init__(self, message: str, code: str) -> None:
        """Initialize prompt error.

        Args:
            message: Human-readable error description
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code


class ComponentTypeError(PromptError, TypeError):
    """Raised when a slot expression cannot be turned into a component.

    Only strings, components, None and iterables of those are accepted.
    The error is raised while the tree is being built, never by render().
    """

    def __init__(self, value: object) -> None:
        """Initialize component type error.

        Args:
            value: The offending slot expression
        """
        value_type = type(value).__name__
        super().__init__(
            message=f"Cannot use value of type '{value_type}' as a prompt component",
            code="component_type_error",
        )
        self.value_type = value_type


class PromptRenderError(PromptError):
    """Raised when a template component cannot be rendered.

    This error indicates that variable substitution or template parsing
    encountered an error while the component was being constructed.
    """

    def __init__(
        self, message: str, variable: Optional[str] = None, details: Optional[dict] = None
    ) -> None:
        """Initialize prompt render error.

        Args:
            message: Description of the render failure
            variable: Optional variable name that caused the error
            details: Optional dictionary with additional render details
        """
        if variable:
            full_message = f"Render failed for variable '{variable}': {message}"
        else:
            full_message = f"Render failed: {message}"

        super().__init__(message=full_message, code="prompt_render_error")
        self.variable = variable
        self.details = details or {}


class PromptConfigError(PromptError):
    """Raised when configuration loaded from the environment is invalid."""

    def __init__(self, setting: str, message: str) -> None:
        """Initialize prompt config error.

        Args:
            setting: Name of the environment variable or field at fault
            message: Description of the problem
        """
        super().__init__(
            message=f"Invalid setting '{setting}': {message}",
            code="prompt_config_error",
        )
        self.setting = setting
