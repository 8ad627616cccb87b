"""Errors raised while loading and interpolating prompt templates."""


class PromptError(Exception):
    """Base class for every mdprompt failure."""


class MissingVariablesError(PromptError):
    """One or more placeholders reference names absent from the variables."""

    def __init__(self, variables: list[str], template: str):
        self.variables = list(variables)
        self.template = template
        super().__init__(f"Missing variables: {', '.join(self.variables)}")


class NamespaceUndefinedError(PromptError):
    """A template reference uses an ``@namespace`` with no path alias."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"Namespace not defined: {namespace}")


class LoadFileReadError(PromptError):
    """A template file could not be read."""

    def __init__(self, file_path: str, original_error: BaseException):
        self.file_path = file_path
        self.original_error = original_error
        super().__init__(f"Failed to read template {file_path}: {original_error}")
