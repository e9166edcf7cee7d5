"""Prompt composition module.

This module provides immutable prompt components, the factory functions
used to assemble them into trees, and ``compose`` for rendering a prompt
in one call.
"""

from promptforge.prompts.builder import (
    assistant_message,
    blank_line,
    compose,
    conditional,
    group,
    line,
    list_item,
    literal,
    repeat,
    role_message,
    section,
    system_message,
    template,
    user_message,
    validate_template_syntax,
    variable,
)
from promptforge.prompts.components import (
    BlankLine,
    Component,
    Conditional,
    Group,
    Line,
    ListItem,
    Literal,
    Repeat,
    RoleMessage,
    Section,
    Template,
    Variable,
    render,
    to_component,
)
from promptforge.prompts.enums import MessageRole
from promptforge.prompts.errors import (
    ComponentTypeError,
    PromptConfigError,
    PromptError,
    PromptRenderError,
)

__all__ = [
    # Components
    "BlankLine",
    "Component",
    "Conditional",
    "Group",
    "Line",
    "ListItem",
    "Literal",
    "Repeat",
    "RoleMessage",
    "Section",
    "Template",
    "Variable",
    "render",
    "to_component",
    # Builders
    "assistant_message",
    "blank_line",
    "compose",
    "conditional",
    "group",
    "line",
    "list_item",
    "literal",
    "repeat",
    "role_message",
    "section",
    "system_message",
    "template",
    "user_message",
    "validate_template_syntax",
    "variable",
    # Enums
    "MessageRole",
    # Errors
    "ComponentTypeError",
    "PromptConfigError",
    "PromptError",
    "PromptRenderError",
]
