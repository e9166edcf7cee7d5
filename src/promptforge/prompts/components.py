"""Prompt components and their rendering rules.

Every component is an immutable Pydantic model exposing a single
``render()`` method. Components nest into a strict tree: a Group owns its
children, a Section or RoleMessage owns its body, and so on. Rendering
walks the tree depth-first and concatenates the results.

Adding a new presentation means adding a new Component subclass with its
own ``render()``; existing variants never change.

Example:
    >>> section = Section(
    ...     title="Tasks",
    ...     body=Group(children=(ListItem(text="A"), ListItem(text="B"))),
    ... )
    >>> section.render()
    '\\nTASKS:\\n- A\\n- B\\n'
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

from promptforge.prompts.errors import ComponentTypeError

LIST_ITEM_PREFIX = "- "


class Component(BaseModel, ABC):
    """Base class for every node of a prompt tree.

    Components are frozen after construction. ``render()`` must be total,
    deterministic and free of side effects, so calling it repeatedly on
    the same tree always yields the same string.
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def render(self) -> str:
        """Render this component to its string form.

        Returns:
            The formatted text of this component and all of its descendants
        """
        ...


class Literal(Component):
    """Raw text, emitted unchanged."""

    text: str

    def render(self) -> str:
        return self.text


class Line(Component):
    """Text followed by a newline."""

    text: str

    def render(self) -> str:
        return f"{self.text}\n"


class ListItem(Component):
    """A bullet point: ``"- "`` prefix and a trailing newline.

    Example:
        >>> ListItem(text="First item").render()
        '- First item\\n'
    """

    text: str

    def render(self) -> str:
        return f"{LIST_ITEM_PREFIX}{self.text}\n"


class BlankLine(Component):
    """A bare newline, used for vertical spacing."""

    def render(self) -> str:
        return "\n"


class Variable(Component):
    """A dynamic value, stringified once when the component is built.

    Attributes:
        rendered: The ``str()`` of the original value, captured eagerly
    """

    rendered: str

    def render(self) -> str:
        return self.rendered


class Group(Component):
    """An ordered sequence of components rendered back to back.

    An empty group renders to the empty string.
    """

    children: tuple[Component, ...] = ()

    def render(self) -> str:
        return "".join(child.render() for child in self.children)


class Section(Component):
    """Content preceded by a blank line and an optional uppercased title.

    The title banner (``TITLE:``) is emitted whenever a title is given,
    including the empty string and including sections with an empty body.
    With no title only the leading newline is emitted.

    Attributes:
        title: Optional heading, uppercased on output
        body: The section content
    """

    title: Optional[str] = None
    body: Component

    def render(self) -> str:
        banner = "\n"
        if self.title is not None:
            banner += f"{self.title.upper()}:\n"
        return banner + self.body.render()


class RoleMessage(Component):
    """Content attributed to a speaker, e.g. ``System: ...``.

    The role is free-form data. ``MessageRole`` lists the conventional
    values but any string is accepted.

    Attributes:
        role: Speaker label written before the colon
        body: The message content
    """

    role: str
    body: Component

    def render(self) -> str:
        return f"{self.role}: {self.body.render()}\n"


class Conditional(Component):
    """Selects one of two branches based on a flag.

    A missing branch renders as the empty string. The ``conditional()``
    factory only builds the branch that is taken, so the other one is
    left as None.

    Attributes:
        flag: Which branch to render
        when_true: Rendered when flag is True
        when_false: Rendered when flag is False
    """

    flag: bool
    when_true: Optional[Component] = None
    when_false: Optional[Component] = None

    def render(self) -> str:
        branch = self.when_true if self.flag else self.when_false
        if branch is None:
            return ""
        return branch.render()


class Repeat(Component):
    """Maps each item of a sequence to a component.

    Without a separator the mapped components are concatenated. With a
    separator each item is rendered in full first (including any trailing
    newline its mapper adds) and the results are joined, so ``Line``
    mappers joined by ``", "`` produce ``"a\\n, b\\n"``.

    The mapper runs once per item at construction time. Its output may be
    any slot expression accepted by ``to_component``.

    Attributes:
        items: The values to iterate over, in order
        mapper: Callable turning one item into a slot expression
        separator: Optional text inserted between rendered items
    """

    items: tuple[Any, ...] = ()
    mapper: Callable[[Any], Any]
    separator: Optional[str] = None

    _components: tuple[Component, ...] = PrivateAttr(default=())

    def model_post_init(self, __context: Any) -> None:
        self._components = tuple(to_component(self.mapper(item)) for item in self.items)

    @property
    def components(self) -> tuple[Component, ...]:
        """The mapped component for each item, in item order."""
        return self._components

    def render(self) -> str:
        rendered = [component.render() for component in self._components]
        if self.separator is None:
            return "".join(rendered)
        return self.separator.join(rendered)


class Template(Component):
    """Output of a Jinja2 template, rendered once at construction.

    Use ``promptforge.prompts.builder.template`` to build one; it runs the
    sandboxed renderer and raises ``PromptRenderError`` on bad input, so
    ``render()`` itself can never fail.

    Attributes:
        source: The original template text
        rendered: The template output
    """

    source: str
    rendered: str

    def render(self) -> str:
        return self.rendered


def to_component(value: Any) -> Component:
    """Normalize a slot expression into a Component.

    Rules, in order of precedence:
        1. ``str`` becomes a ``Literal``
        2. a ``Component`` is returned unchanged
        3. ``None`` becomes an empty ``Literal``
        4. any other ordered iterable becomes a ``Group`` of its normalized
           items; dicts, sets and non-component models are rejected

    Args:
        value: The slot expression to normalize

    Returns:
        The equivalent component

    Raises:
        ComponentTypeError: If the value matches none of the rules
    """
    if isinstance(value, str):
        return Literal(text=value)
    if isinstance(value, Component):
        return value
    if value is None:
        return Literal(text="")
    # dicts and models iterate over keys and fields; sets have no stable order
    if isinstance(value, Iterable) and not isinstance(
        value, (bytes, dict, set, frozenset, BaseModel)
    ):
        return Group(children=tuple(to_component(item) for item in value))
    raise ComponentTypeError(value)


def render(component: Component) -> str:
    """Render any component to a string.

    Args:
        component: Root of the tree to render

    Returns:
        The rendered text
    """
    return component.render()
