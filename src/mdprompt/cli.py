"""Top-level Click group for the mdprompt CLI."""

import click

from mdprompt.render_cmd import list_vars, render


@click.group()
def main():
    """mdprompt - build prompts from Markdown templates."""


main.add_command(render)
main.add_command(list_vars)
