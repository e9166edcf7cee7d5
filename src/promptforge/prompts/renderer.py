"""Sandboxed Jinja2 rendering for template components.

Template components are rendered once, when they are built, using a
sandboxed environment so that template text cannot execute arbitrary
code. Undefined variables are errors rather than silent blanks.
"""

from typing import Any, Callable, Optional, Tuple, Union

from jinja2 import (
    BaseLoader,
    Environment,
    StrictUndefined,
    TemplateError,
    TemplateSyntaxError,
    Undefined,
    UndefinedError,
)
from jinja2.sandbox import SandboxedEnvironment

from promptforge.observability.logging import get_logger
from promptforge.prompts.components import LIST_ITEM_PREFIX
from promptforge.prompts.errors import PromptRenderError

logger = get_logger(__name__)


class StringTemplateLoader(BaseLoader):
    """Loader that treats the template name as the template source.

    Nothing is read from the filesystem.
    """

    def get_source(
        self, environment: Environment, template: str
    ) -> Tuple[str, Optional[str], Optional[Callable[[], bool]]]:
        return template, None, None


class TemplateRenderer:
    """Jinja2 renderer with prompt-oriented filters.

    Custom Filters:
        - default: Fall back to a value when the variable is undefined, None or blank
        - bullet_list: Format a sequence as ``- item`` lines

    Example:
        >>> renderer = TemplateRenderer()
        >>> renderer.render("Hello {{ name | default('World') }}!", {"name": None})
        'Hello World!'
    """

    def __init__(self) -> None:
        self._env = SandboxedEnvironment(
            loader=StringTemplateLoader(),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["default"] = self._filter_default
        self._env.filters["bullet_list"] = self._filter_bullet_list

    @staticmethod
    def _filter_default(value: Any, fallback: Any = "", blank_is_missing: bool = True) -> Any:
        """Replace a missing value with ``fallback``.

        Undefined names count as missing, so StrictUndefined does not raise
        when the filter is applied to them.
        """
        missing = value is None or isinstance(value, Undefined)
        if blank_is_missing and isinstance(value, str):
            missing = not value.strip()
        return fallback if missing else value

    @staticmethod
    def _filter_bullet_list(items: Union[list, tuple], bullet: str = LIST_ITEM_PREFIX) -> str:
        """Format items one per line, each prefixed with ``bullet``.

        Non-sequence values are stringified as-is. Every line, including
        the last, ends with a newline to match ListItem output.
        """
        if not isinstance(items, (list, tuple)):
            return str(items)
        return "".join(f"{bullet}{item}\n" for item in items)

    def render(self, source: str, variables: Optional[dict[str, Any]] = None) -> str:
        """Render a template string with the given variables.

        Args:
            source: Jinja2 template text
            variables: Values available to the template (default: none)

        Returns:
            The rendered text

        Raises:
            PromptRenderError: If the template is malformed or references
                an undefined variable
        """
        if variables is None:
            variables = {}

        try:
            return self._env.from_string(source).render(**variables)
        except UndefinedError as e:
            error_message = str(e)
            # "'name' is undefined"
            parts = error_message.split("'")
            variable_name = parts[1] if len(parts) >= 2 else None
            logger.warning("template_variable_undefined", variable=variable_name)
            raise PromptRenderError(
                message=error_message,
                variable=variable_name,
                details={"template": source, "variables": sorted(variables)},
            ) from e
        except TemplateSyntaxError as e:
            logger.warning("template_syntax_error", line=e.lineno, error=e.message)
            raise PromptRenderError(
                message=str(e),
                details={"template": source, "line": e.lineno},
            ) from e
        except TemplateError as e:
            # sandbox violations and other runtime template failures
            logger.warning("template_render_failed", error=str(e))
            raise PromptRenderError(message=str(e), details={"template": source}) from e

    def validate_syntax(self, source: str) -> list[str]:
        """Check template syntax without rendering.

        Args:
            source: Jinja2 template text

        Returns:
            Syntax error messages, empty when the template parses
        """
        try:
            self._env.parse(source)
        except TemplateSyntaxError as e:
            return [str(e)]
        return []
