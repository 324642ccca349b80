"""CLI entry point for simpledot: parse a DOT file and print its IR."""

import logging
import sys

import click

from simpledot.config import ParserConfig
from simpledot.errors import GraphParseError
from simpledot.ir.dump import format_graph
from simpledot.parsers import parse_graph


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["tree", "repr"]),
    default="tree",
    help="Print an indented tree or the dataclass repr",
)
@click.option("--no-comments", "no_comments", is_flag=True, help="Treat //, /* */ and # lines as input")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log parser debug messages to stderr")
def main(input: str | None, output_format: str, no_comments: bool, verbose: bool) -> None:
    """Parse a DOT graph description and print its intermediate representation."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        graph = parse_graph(text, ParserConfig(skip_comments=not no_comments))
    except GraphParseError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if output_format == "repr":
        click.echo(repr(graph))
    else:
        click.echo(format_graph(graph), nl=False)


if __name__ == "__main__":
    main()
