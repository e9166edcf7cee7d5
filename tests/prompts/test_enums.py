"""Tests for prompt enums."""

from promptforge.prompts.enums import MessageRole


class TestMessageRole:
    """Tests for MessageRole enum."""

    def test_values(self) -> None:
        """Roles should use their display labels as values."""
        assert MessageRole.SYSTEM.value == "System"
        assert MessageRole.USER.value == "User"
        assert MessageRole.ASSISTANT.value == "Assistant"

    def test_is_string_enum(self) -> None:
        """Roles should compare equal to plain strings."""
        assert MessageRole.USER == "User"
        assert isinstance(MessageRole.SYSTEM, str)

    def test_lookup_by_value(self) -> None:
        """Roles should be constructible from their label."""
        assert MessageRole("Assistant") is MessageRole.ASSISTANT
