"""Path aliases: map an ``@namespace`` to a workspace-relative directory."""

import json
import os

from mdprompt.errors import NamespaceUndefinedError

NAMESPACE_MARKER = "@"


def _strip_marker(name: str) -> str:
    return name[len(NAMESPACE_MARKER):] if name.startswith(NAMESPACE_MARKER) else name


class PathAliases(dict):
    """Namespace token (without ``@``) to directory prefix."""

    def __init__(self, aliases=None):
        super().__init__()
        for name, directory in (aliases or {}).items():
            self[_strip_marker(name)] = directory

    def resolve(self, namespace: str) -> str:
        """Return the directory for a namespace token, with or without ``@``.

        Raises NamespaceUndefinedError carrying the token with its marker.
        """
        token = _strip_marker(namespace)
        if token not in self:
            raise NamespaceUndefinedError(NAMESPACE_MARKER + token)
        return self[token]

    @classmethod
    def from_pairs(cls, pairs) -> "PathAliases":
        """Build aliases from ``name=directory`` strings."""
        aliases = cls()
        for pair in pairs:
            name, sep, directory = pair.partition("=")
            name = _strip_marker(name.strip())
            if not sep or not name or not directory.strip():
                msg = f"Invalid alias '{pair}': expected NAME=DIRECTORY"
                raise ValueError(msg)
            aliases[name] = directory.strip()
        return aliases

    @classmethod
    def load(cls, alias_file: str) -> "PathAliases":
        """Load aliases from a JSON file of the form ``{"aliases": {...}}``.

        Raises FileNotFoundError if the file does not exist and ValueError if
        its content is not an object of string directories.
        """
        if not os.path.isfile(alias_file):
            raise FileNotFoundError(f"Alias file not found: {alias_file}")
        with open(alias_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        aliases = data.get("aliases") if isinstance(data, dict) else None
        if not isinstance(aliases, dict):
            msg = f"Alias file {alias_file} must contain an 'aliases' object"
            raise ValueError(msg)
        for name, directory in aliases.items():
            if not isinstance(directory, str):
                msg = f"Alias '{name}' in {alias_file} must map to a directory string"
                raise ValueError(msg)
        return cls(aliases)
