"""Prompt: interpolates {{variable}} placeholders into a template string.

Placeholders inside fenced code blocks are left verbatim and never need a
variable. Fences are tracked by parity: text after an odd number of ``` markers
counts as fenced, so an unclosed fence covers the rest of the template.
"""

import json
import math
import numbers
import re
from collections.abc import Mapping
from typing import Any

from mdprompt.errors import MissingVariablesError
from mdprompt.loader import TemplateLoader

CODE_FENCE = "```"

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}", re.ASCII)


class _Undefined:
    """Marker for a variable that is bound but has no value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNDEFINED"

    def __bool__(self):
        return False


UNDEFINED = _Undefined()


def _split_fences(template: str) -> list[str]:
    """Split on fence markers; odd-indexed segments are inside a fence."""
    return template.split(CODE_FENCE)


def _is_fenced(index: int) -> bool:
    return index % 2 == 1


def find_placeholders(template: str) -> list[str]:
    """Return identifiers referenced outside fenced code, de-duplicated in order."""
    names = []
    for index, segment in enumerate(_split_fences(template)):
        if _is_fenced(index):
            continue
        for match in PLACEHOLDER_PATTERN.finditer(segment):
            name = match.group(1)
            if name not in names:
                names.append(name)
    return names


def _json_compatible(value):
    """Prepare a structured value so json.dumps emits strict JSON.

    Keys JSON cannot encode go through str(), non-finite floats and UNDEFINED
    become null, and sets become arrays.
    """
    if value is UNDEFINED:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {
            key if isinstance(key, (str, int, bool)) or key is None else str(key): _json_compatible(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_json_compatible(item) for item in value]
    return value


def stringify_value(value: Any) -> str:
    """Render a variable value as it appears in the resolved prompt."""
    if isinstance(value, str):
        return value
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Number):
        return str(value)
    return json.dumps(
        _json_compatible(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=str
    )


def interpolate(template: str, variables: Mapping[str, Any]) -> str:
    """Substitute every placeholder outside fenced code.

    Raises MissingVariablesError listing each referenced name that has no key
    in ``variables``. A key bound to None or UNDEFINED is not missing.
    """
    missing = [name for name in find_placeholders(template) if name not in variables]
    if missing:
        raise MissingVariablesError(missing, template)

    def replace(match):
        return stringify_value(variables[match.group(1)])

    segments = _split_fences(template)
    return CODE_FENCE.join(
        segment if _is_fenced(index) else PLACEHOLDER_PATTERN.sub(replace, segment)
        for index, segment in enumerate(segments)
    )


class Prompt:
    """A template bound to variables, with its resolved value kept current."""

    # Process-wide aliases used by mdprompt.loader.load(); assign or clear freely.
    path_alias: dict[str, str] = {}

    def __init__(self, template: str, variables: Mapping[str, Any] | None = None):
        variables = {} if variables is None else variables
        self._template = template
        self._value = interpolate(template, variables)
        self._variables = variables

    @classmethod
    def from_file(
        cls,
        reference: str,
        variables: Mapping[str, Any] | None = None,
        base_path=None,
        loader: TemplateLoader | None = None,
    ) -> "Prompt":
        """Load a template reference and bind it to ``variables``."""
        if loader is None:
            loader = TemplateLoader(cls.path_alias)
        return cls(loader.load(reference, base_path), variables)

    def set_variables(self, variables: Mapping[str, Any] | None) -> None:
        """Replace all variables and re-interpolate; leaves state unchanged on failure."""
        variables = {} if variables is None else variables
        value = interpolate(self._template, variables)
        self._variables = variables
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    @property
    def variables(self) -> Mapping[str, Any]:
        return self._variables

    @property
    def template(self) -> str:
        return self._template

    @property
    def placeholders(self) -> list[str]:
        return find_placeholders(self._template)

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"Prompt({self._template!r}, {self._variables!r})"
