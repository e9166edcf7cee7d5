"""Declarative prompt construction.

This module provides the factory functions used to build prompt trees and
the ``compose`` entry point that normalizes a sequence of slot expressions
into one Group and renders it.

A slot expression is anything ``to_component`` accepts: a string, a
component, None, or an iterable of those. Ordinary Python control flow
works around the calls:

Example:
    >>> tasks = ["Deploy", "Monitor"]
    >>> compose(
    ...     system_message("You are a project assistant."),
    ...     section("Tasks", [list_item(task) for task in tasks]),
    ...     conditional(len(tasks) > 5, "Prioritize ruthlessly."),
    ... )
    'System: You are a project assistant.\\n\\nTASKS:\\n- Deploy\\n- Monitor\\n'
"""

from collections.abc import Iterable
from typing import Any, Callable, Optional, TypeVar, Union

from promptforge.observability.logging import get_logger
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
    to_component,
)
from promptforge.prompts.enums import MessageRole
from promptforge.prompts.renderer import TemplateRenderer

logger = get_logger(__name__)

T = TypeVar("T")

# Either a slot expression, or a zero-argument callable producing one
Body = Union[Any, Callable[[], Any]]


def _build(body: Body) -> Component:
    """Invoke a body builder if it is callable, then normalize the result."""
    if callable(body):
        body = body()
    return to_component(body)


def literal(text: str) -> Literal:
    return Literal(text=text)


def line(text: str) -> Line:
    return Line(text=text)


def list_item(text: str) -> ListItem:
    return ListItem(text=text)


def blank_line() -> BlankLine:
    return BlankLine()


def variable(value: Any) -> Variable:
    """Capture ``str(value)`` now; later changes to ``value`` are not seen.

    Args:
        value: Any object

    Returns:
        A Variable holding the stringified value
    """
    return Variable(rendered=str(value))


def group(children: Iterable[Any]) -> Group:
    """Group slot expressions into one component, preserving order.

    Args:
        children: Slot expressions to normalize

    Returns:
        A Group of the normalized children

    Raises:
        ComponentTypeError: If a child is not a valid slot expression
    """
    return Group(children=tuple(to_component(child) for child in children))


def section(title: Optional[str], body: Body) -> Section:
    """Build a section with an optional title.

    Args:
        title: Heading, uppercased on output; None for no banner
        body: Slot expression, or a zero-argument callable returning one

    Returns:
        The Section component
    """
    return Section(title=title, body=_build(body))


def role_message(role: Union[MessageRole, str], body: Body) -> RoleMessage:
    """Attribute content to a speaker role.

    Args:
        role: A MessageRole or any custom role name
        body: Slot expression, or a zero-argument callable returning one

    Returns:
        The RoleMessage component
    """
    if isinstance(role, MessageRole):
        role = role.value
    return RoleMessage(role=role, body=_build(body))


def system_message(body: Body) -> RoleMessage:
    return role_message(MessageRole.SYSTEM, body)


def user_message(body: Body) -> RoleMessage:
    return role_message(MessageRole.USER, body)


def assistant_message(body: Body) -> RoleMessage:
    return role_message(MessageRole.ASSISTANT, body)


def conditional(flag: bool, when_true: Body, when_false: Optional[Body] = None) -> Conditional:
    """Include content depending on a flag.

    Only the branch that is taken gets built: pass callables to defer the
    construction of the branch that is not.

    Args:
        flag: Which branch to keep
        when_true: Content when flag is True
        when_false: Content when flag is False; omitted means nothing

    Returns:
        The Conditional component

    Example:
        >>> conditional(False, lambda: line("Debug"), lambda: line("Production")).render()
        'Production\\n'
    """
    if flag:
        return Conditional(flag=True, when_true=_build(when_true))
    if when_false is None:
        return Conditional(flag=False)
    return Conditional(flag=False, when_false=_build(when_false))


def repeat(
    items: Iterable[T],
    mapper: Callable[[T], Any],
    separator: Optional[str] = None,
) -> Repeat:
    """Map every item of a collection to a component.

    Args:
        items: Values to iterate over, in order
        mapper: Turns one item into a slot expression
        separator: Joined between rendered items when given

    Returns:
        The Repeat component

    Example:
        >>> repeat(["x", "y", "z"], literal, separator=", ").render()
        'x, y, z'
    """
    return Repeat(items=tuple(items), mapper=mapper, separator=separator)


def template(source: str, **variables: Any) -> Template:
    """Render a Jinja2 template into a component.

    The template is rendered immediately in a sandbox; the component only
    stores the result.

    Args:
        source: Jinja2 template text
        **variables: Values available to the template

    Returns:
        The Template component

    Raises:
        PromptRenderError: If the template is malformed or uses an
            undefined variable
    """
    return Template(source=source, rendered=TemplateRenderer().render(source, variables))


def validate_template_syntax(source: str) -> list[str]:
    """Return syntax error messages for a template, empty when valid."""
    return TemplateRenderer().validate_syntax(source)


def compose(*slots: Any) -> str:
    """Build a prompt from slot expressions and render it.

    Each slot is normalized with ``to_component``, the results are wrapped
    in a single Group in declaration order, and the rendered string is
    returned. The tree itself is never exposed.

    Args:
        *slots: Strings, components, None, or iterables of those

    Returns:
        The rendered prompt

    Raises:
        ComponentTypeError: If a slot is not a valid slot expression

    Example:
        >>> compose(system_message("You are helpful."), user_message("Hi"))
        'System: You are helpful.\\nUser: Hi\\n'
    """
    root = group(slots)
    result = root.render()
    logger.debug("prompt_composed", slots=len(root.children), length=len(result))
    return result
