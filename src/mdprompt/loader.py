"""Template loader: resolves template references to file contents.

A reference is ``[@namespace/]relative/path[.ext]``. Namespaced references are
resolved through path aliases relative to the current working directory;
plain references are resolved relative to a caller-supplied base path.
"""

import re
from collections.abc import Mapping
from pathlib import Path

from mdprompt.aliases import NAMESPACE_MARKER, PathAliases
from mdprompt.errors import LoadFileReadError

DEFAULT_EXTENSION = ".md"

_SEPARATOR = re.compile(r"[/\\]")


class TemplateLoader:
    """Reads template text, honoring path aliases and the default extension."""

    def __init__(self, aliases: Mapping[str, str] | None = None, default_extension: str = DEFAULT_EXTENSION):
        self.aliases = aliases if isinstance(aliases, PathAliases) else PathAliases(aliases)
        self.default_extension = default_extension

    def resolve_path(self, reference: str, base_path=None) -> Path:
        """Return the file path a reference points to, without reading it.

        Raises NamespaceUndefinedError for an ``@namespace`` with no alias.
        """
        if reference.startswith(NAMESPACE_MARKER):
            namespace, remainder = self._split_namespace(reference)
            path = Path.cwd() / self.aliases.resolve(namespace) / remainder
        else:
            base = Path.cwd() if base_path is None else Path(base_path)
            path = base / reference
        if not path.suffix:
            path = path.with_name(path.name + self.default_extension)
        return path

    @staticmethod
    def _split_namespace(reference):
        """Split ``@namespace/rest`` into the namespace token and the rest."""
        parts = _SEPARATOR.split(reference[len(NAMESPACE_MARKER):], maxsplit=1)
        remainder = parts[1] if len(parts) > 1 else ""
        return parts[0], remainder

    def load(self, reference: str, base_path=None) -> str:
        """Read the template a reference points to and return its raw text.

        Raises NamespaceUndefinedError or LoadFileReadError.
        """
        path = self.resolve_path(reference, base_path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadFileReadError(str(path), exc) from exc


def load(reference: str, base_path=None) -> str:
    """Load a template using the process-wide ``Prompt.path_alias`` aliases."""
    from mdprompt.prompt import Prompt

    return TemplateLoader(Prompt.path_alias).load(reference, base_path)
