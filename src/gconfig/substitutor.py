"""Environment variable expansion for property values."""
import logging
import os
import re
from typing import List, Mapping, Optional

from gconfig.exceptions.config import EnvVarNotFoundError


logger = logging.getLogger(__name__)

# A value (or list element) that is entirely ${...}
PLACEHOLDER_PATTERN = re.compile(r"^\$\{([^}]+)\}$")

LIST_SEPARATOR = ","


class EnvSubstitutor:
    """Expands ``${...}`` placeholders from the process environment.

    Supports:
    - Simple substitution: ${VAR_NAME} -> env var value
    - Shell-style default: ${VAR_NAME:-default} -> default if unset or empty
    - Spring-style default: ${VAR_NAME:default} -> default if unset or empty

    Only values that are a placeholder as a whole are expanded; text such
    as ``http://${HOST}`` is returned untouched. An unset variable with no
    default expands to "" unless ``strict`` is set.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, strict: bool = False):
        """Initialize substitutor.

        Args:
            environ: Environment mapping to read from (default: os.environ)
            strict: Raise EnvVarNotFoundError instead of expanding to ""
        """
        self.environ = environ if environ is not None else os.environ
        self.strict = strict

    @staticmethod
    def is_placeholder(value: str) -> bool:
        return PLACEHOLDER_PATTERN.match(value.strip()) is not None

    def expand(self, value: str) -> str:
        """Expand a value if it is a placeholder, else return it unchanged."""
        match = PLACEHOLDER_PATTERN.match(value.strip())
        if match is None:
            return value
        return self._evaluate_expression(match.group(1))

    def expand_list(self, value: str) -> str:
        """Expand each comma-separated element independently.

        Separators and the whitespace around each element are kept, so
        ``"a, ${B:-b}"`` becomes ``"a, b"`` when B is unset.
        """
        elements = value.split(LIST_SEPARATOR)
        expanded = []

        for element in elements:
            stripped = element.strip()
            if not self.is_placeholder(stripped):
                expanded.append(element)
                continue

            leading = element[: len(element) - len(element.lstrip())]
            trailing = element[len(element.rstrip()):]
            expanded.append(f"{leading}{self.expand(stripped)}{trailing}")

        return LIST_SEPARATOR.join(expanded)

    def split_list(self, value: str) -> List[str]:
        """Expand a comma-separated value and return its non-empty, trimmed elements."""
        return [item.strip() for item in self.expand_list(value).split(LIST_SEPARATOR) if item.strip()]

    def _evaluate_expression(self, expression: str) -> str:
        """Evaluate the text between ``${`` and ``}``.

        Supported formats:
        - VAR
        - VAR:-default
        - VAR:default
        """
        if ":-" in expression:
            var_name, default_value = expression.split(":-", 1)
            return self._get_env_var(var_name.strip(), default=default_value)
        elif ":" in expression:
            var_name, default_value = expression.split(":", 1)
            return self._get_env_var(var_name.strip(), default=default_value)
        else:
            return self._get_env_var(expression.strip())

    def _get_env_var(self, var_name: str, default: Optional[str] = None) -> str:
        """Get environment variable with optional default.

        Raises:
            EnvVarNotFoundError: Var unset, no default, strict mode
        """
        value = self.environ.get(var_name)
        if value:
            logger.debug(f"Env var found: {var_name}", extra={"var_name": var_name})
            return value

        if default is not None:
            logger.debug(
                f"Env var not set, using default: {var_name}",
                extra={"var_name": var_name},
            )
            return default

        if value is None and self.strict:
            logger.error(
                f"Env var not found (no default): {var_name}",
                extra={"var_name": var_name},
            )
            raise EnvVarNotFoundError(
                message=f"Environment variable '{var_name}' not found",
                var_name=var_name,
                suggestions=[
                    f"Set {var_name} in the environment",
                    f"Or provide a default: ${{{var_name}:-your_default}}",
                ],
            )

        logger.debug(f"Env var not set, expanding to empty: {var_name}", extra={"var_name": var_name})
        return ""
