"""Tests for prompt errors."""

from promptforge.prompts.errors import (
    ComponentTypeError,
    PromptConfigError,
    PromptError,
    PromptRenderError,
)


class TestPromptError:
    """Tests for PromptError base exception."""

    def test_error_initialization(self) -> None:
        """PromptError should initialize with message and code."""
        error = PromptError(message="Test error", code="test_error")

        assert error.message == "Test error"
        assert error.code == "test_error"
        assert str(error) == "Test error"

    def test_error_is_exception(self) -> None:
        """PromptError should be an Exception."""
        assert isinstance(PromptError("Test", "test"), Exception)


class TestComponentTypeError:
    """Tests for ComponentTypeError."""

    def test_initialization(self) -> None:
        """Should record the offending type name."""
        error = ComponentTypeError(42)

        assert error.value_type == "int"
        assert error.message == "Cannot use value of type 'int' as a prompt component"
        assert error.code == "component_type_error"

    def test_is_prompt_and_type_error(self) -> None:
        """Should be both a PromptError and a TypeError."""
        error = ComponentTypeError(object())

        assert isinstance(error, PromptError)
        assert isinstance(error, TypeError)


class TestPromptRenderError:
    """Tests for PromptRenderError."""

    def test_initialization_with_variable(self) -> None:
        """Should include the variable in the message."""
        error = PromptRenderError(message="'x' is undefined", variable="x")

        assert error.message == "Render failed for variable 'x': 'x' is undefined"
        assert error.variable == "x"
        assert error.details == {}
        assert error.code == "prompt_render_error"

    def test_initialization_without_variable(self) -> None:
        """Should use a generic prefix without a variable."""
        error = PromptRenderError(message="bad syntax", details={"line": 3})

        assert error.message == "Render failed: bad syntax"
        assert error.variable is None
        assert error.details == {"line": 3}


class TestPromptConfigError:
    """Tests for PromptConfigError."""

    def test_initialization(self) -> None:
        """Should name the setting at fault."""
        error = PromptConfigError("PROMPTFORGE_LOG_LEVEL", "unknown level")

        assert error.setting == "PROMPTFORGE_LOG_LEVEL"
        assert error.message == "Invalid setting 'PROMPTFORGE_LOG_LEVEL': unknown level"
        assert error.code == "prompt_config_error"
        assert isinstance(error, PromptError)
