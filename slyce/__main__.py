"""Slice a JSON array read from stdin: echo '[1,2,3]' | slyce '[::-1]'"""

import json
import logging
from typing import TextIO

import click

from ._src.invalid_step import InvalidStep
from ._src.slice import Slice

logger = logging.getLogger(__name__)


def parse_expression(ctx: click.Context, param: click.Parameter, value: str) -> Slice:
    try:
        return Slice.parse(value)
    except InvalidStep as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    except ValueError as e:
        raise click.BadParameter(f"expected [start:end:step], got {value!r}", ctx=ctx, param=param) from e


@click.command()
@click.version_option(package_name="slyce")
@click.argument("expression", callback=parse_expression)
@click.option("--input", "-i", "input_", type=click.File("r"), default="-", help="JSON array to slice (default: stdin)")
@click.option("--verbose", "-v", is_flag=True, help="Log the parsed slice and input size")
def main(expression: Slice, input_: TextIO, verbose: bool) -> None:
    """Print EXPRESSION, e.g. '[1:-1:2]', applied to a JSON array."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    logger.debug("parsed %s as %r", expression, expression)
    try:
        data = json.load(input_)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"invalid JSON input: {e}") from e
    if not isinstance(data, list):
        raise click.ClickException(f"expected a JSON array, got {type(data).__name__}")
    logger.debug("slicing %d elements", len(data))
    click.echo(json.dumps(list(expression.apply(data))))


if __name__ == "__main__":
    main()
