"""Click commands for rendering prompt templates and listing their variables."""

import json
import sys
from contextlib import contextmanager

import click

from mdprompt.aliases import PathAliases
from mdprompt.errors import PromptError
from mdprompt.loader import TemplateLoader
from mdprompt.prompt import Prompt, find_placeholders


@contextmanager
def with_error_handling():
    try:
        yield
    except (PromptError, ValueError, OSError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)


def _loader_options(fn):
    """Apply the shared Click options for locating a template."""
    for option in reversed([
        click.option("--base-path", type=click.Path(file_okay=False), default=None,
                     help="Directory plain references are resolved against (default: cwd)"),
        click.option("--alias", "alias_pairs", multiple=True, metavar="NAME=DIR",
                     help="Map @NAME to a directory relative to the working directory"),
        click.option("--aliases-file", type=click.Path(dir_okay=False), default=None,
                     help='JSON file of the form {"aliases": {"name": "dir"}}'),
        click.option("--verbose", is_flag=True, help="Print the resolved template path to stderr"),
    ]):
        fn = option(fn)
    return fn


def _parse_var_value(raw):
    """Decode a --var value as JSON, falling back to the plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_vars(pairs, vars_json=None):
    """Merge a --vars-json file with NAME=VALUE pairs; pairs win on conflict."""
    variables = {}
    if vars_json:
        with open(vars_json, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            msg = f"Variables file {vars_json} must contain a JSON object"
            raise ValueError(msg)
        variables.update(data)
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name.strip():
            msg = f"Invalid variable '{pair}': expected NAME=VALUE"
            raise ValueError(msg)
        variables[name.strip()] = _parse_var_value(raw)
    return variables


def build_loader(alias_pairs, aliases_file=None):
    """Create a TemplateLoader from an optional alias file plus NAME=DIR pairs."""
    aliases = PathAliases.load(aliases_file) if aliases_file else PathAliases()
    aliases.update(PathAliases.from_pairs(alias_pairs))
    return TemplateLoader(aliases)


def _load_template(reference, base_path, alias_pairs, aliases_file, verbose):
    loader = build_loader(alias_pairs, aliases_file)
    if verbose:
        click.echo(f"Loading {loader.resolve_path(reference, base_path)}", err=True)
    return loader.load(reference, base_path)


@click.command("render")
@click.argument("reference")
@_loader_options
@click.option("--var", "var_pairs", multiple=True, metavar="NAME=VALUE",
              help="Bind a variable; VALUE is parsed as JSON when possible")
@click.option("--vars-json", type=click.Path(dir_okay=False), default=None,
              help="JSON object file of variables; --var entries override it")
def render(reference, base_path, alias_pairs, aliases_file, verbose, var_pairs, vars_json):
    """Render the prompt template REFERENCE with the given variables."""
    with with_error_handling():
        template = _load_template(reference, base_path, alias_pairs, aliases_file, verbose)
        prompt = Prompt(template, parse_vars(var_pairs, vars_json))
    click.echo(prompt.value)


@click.command("vars")
@click.argument("reference")
@_loader_options
def list_vars(reference, base_path, alias_pairs, aliases_file, verbose):
    """List the variables the template REFERENCE requires, in order."""
    with with_error_handling():
        template = _load_template(reference, base_path, alias_pairs, aliases_file, verbose)
    for name in find_placeholders(template):
        click.echo(name)
