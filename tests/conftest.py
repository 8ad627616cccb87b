"""Shared fixtures for mdprompt tests."""

import pytest

from mdprompt.prompt import Prompt


@pytest.fixture(autouse=True)
def reset_path_alias():
    """Keep the process-wide alias registry from leaking between tests."""
    Prompt.path_alias = {}
    yield
    Prompt.path_alias = {}


@pytest.fixture
def write_template(tmp_path):
    """Write a template file beneath tmp_path and return its path."""

    def write(relative_path, content):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write
