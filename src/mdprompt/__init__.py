"""Build prompt strings from templates with {{variable}} placeholders."""

from mdprompt.aliases import PathAliases
from mdprompt.errors import (
    LoadFileReadError,
    MissingVariablesError,
    NamespaceUndefinedError,
    PromptError,
)
from mdprompt.loader import TemplateLoader, load
from mdprompt.prompt import UNDEFINED, Prompt, find_placeholders

__all__ = [
    "LoadFileReadError",
    "MissingVariablesError",
    "NamespaceUndefinedError",
    "PathAliases",
    "Prompt",
    "PromptError",
    "TemplateLoader",
    "UNDEFINED",
    "find_placeholders",
    "load",
]
