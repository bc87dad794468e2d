"""CLI entry point for coderoast.

    roast <file> [--serious] [--severity mild|medium|harsh] [--model NAME] [--no-color]

Exit status is 0 on success and 1 on any RoastError; the error is printed
once to stderr.
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from coderoast_core.config import DEFAULT_MODEL
from coderoast_core.errors import InvalidSeverityError, RoastError
from coderoast_core.prompts import DEFAULT_SEVERITY, SEVERITIES

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.command(name="roast")
@click.version_option(
    version=importlib.metadata.version("coderoast"),
    prog_name="roast",
)
@click.argument("file")
@click.option("--serious", "-s", is_flag=True, help="Serious mode (professional review).")
@click.option(
    "--severity",
    default=DEFAULT_SEVERITY,
    show_default=True,
    metavar="LEVEL",
    help=f"Roast severity: {', '.join(SEVERITIES)}.",
)
@click.option("--model", "-m", default=DEFAULT_MODEL, show_default=True, help="AI model to use.")
@click.option("--no-color", "no_color", is_flag=True, help="Disable colors.")
@click.option("--verbose", "-v", is_flag=True, help="Log request details to stderr.")
@click.pass_context
def main(ctx: click.Context, file: str, serious: bool, severity: str, model: str, no_color: bool, verbose: bool):
    """AI code reviewer that roasts your code (with love).

    \b
    Required environment variables:
      ANTHROPIC_API_KEY    Anthropic API key
    """
    from coderoast_core.config import load_config
    from coderoast_core.render import make_console
    from coderoast_core.roaster import run_roast

    config = load_config(
        cli_overrides={
            "serious": serious,
            "severity": severity,
            "model": model,
            "color": not no_color,
        }
    )

    console = make_console(color=config["color"])
    err_console = make_console(color=config["color"], stderr=True)
    _configure_logging(verbose, err_console)

    try:
        run_roast(file, config, console)
    except RoastError as e:
        logger.debug("Roast failed: %r", e)
        err_console.print(Text.assemble(("💥 Error:", "red"), " ", str(e)), soft_wrap=True)
        if isinstance(e, InvalidSeverityError):
            err_console.print(Text(f"Valid options: {', '.join(e.valid)}", style="dim"))
        ctx.exit(1)
